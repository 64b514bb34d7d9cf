"""Editor document and cursor models"""

from typing import List, Protocol, runtime_checkable
from pydantic import BaseModel, Field


class CursorPosition(BaseModel):
    """Cursor location in a document (1-based line and column)"""
    line_number: int = Field(ge=1)
    column: int = Field(ge=1)

    class Config:
        frozen = True


class EditorRange(BaseModel):
    """Span between two document positions, end exclusive"""
    start_line_number: int = Field(ge=1)
    start_column: int = Field(ge=1)
    end_line_number: int = Field(ge=1)
    end_column: int = Field(ge=1)

    class Config:
        frozen = True


@runtime_checkable
class EditorModel(Protocol):
    """Read-only view over an editor's text buffer"""

    def get_value_in_range(self, editor_range: EditorRange) -> str:
        ...

    def get_line_count(self) -> int:
        ...

    def get_line_max_column(self, line_number: int) -> int:
        ...


class TextDocument:
    """In-memory editor model backed by a string"""

    def __init__(self, text: str):
        self._lines: List[str] = text.split("\n")

    def get_line_count(self) -> int:
        return len(self._lines)

    def get_line_max_column(self, line_number: int) -> int:
        return len(self._lines[self._clamp_line(line_number) - 1]) + 1

    def get_value_in_range(self, editor_range: EditorRange) -> str:
        """
        Return the text between two positions

        Out-of-bounds lines and columns are clamped to the document, so a range
        that ends before it starts yields an empty string.
        """
        start = self._offset(editor_range.start_line_number, editor_range.start_column)
        end = self._offset(editor_range.end_line_number, editor_range.end_column)
        if end <= start:
            return ""
        return "\n".join(self._lines)[start:end]

    def _clamp_line(self, line_number: int) -> int:
        return max(1, min(line_number, len(self._lines)))

    def _offset(self, line_number: int, column: int) -> int:
        line_number = self._clamp_line(line_number)
        column = max(1, min(column, self.get_line_max_column(line_number)))
        # +1 per preceding line for the newline separator
        preceding = sum(len(line) + 1 for line in self._lines[:line_number - 1])
        return preceding + column - 1
