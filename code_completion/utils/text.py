"""Text extraction around the cursor"""

from ..models.editor import CursorPosition, EditorModel, EditorRange


def get_text_before_cursor(position: CursorPosition, model: EditorModel) -> str:
    """Return everything from the start of the document up to the cursor"""
    return model.get_value_in_range(
        EditorRange(
            start_line_number=1,
            start_column=1,
            end_line_number=position.line_number,
            end_column=position.column,
        )
    )


def get_text_after_cursor(position: CursorPosition, model: EditorModel) -> str:
    """Return everything from the cursor to the end of the document"""
    line_count = model.get_line_count()
    return model.get_value_in_range(
        EditorRange(
            start_line_number=position.line_number,
            start_column=position.column,
            end_line_number=line_count,
            end_column=model.get_line_max_column(line_count),
        )
    )
