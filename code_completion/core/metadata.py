"""Completion metadata construction"""

from typing import Any, Optional, Sequence

from ..models.completion import CompletionMetadata, CompletionMode, EditorState
from ..models.editor import CursorPosition, EditorModel
from ..utils.text import get_text_after_cursor, get_text_before_cursor


def determine_completion_mode(text_before_cursor: str, text_after_cursor: str) -> CompletionMode:
    """Fill in the middle only when there is code on both sides of the cursor"""
    if text_before_cursor and text_after_cursor:
        return CompletionMode.FILL_IN_THE_MIDDLE
    return CompletionMode.COMPLETION


def construct_completion_metadata(
    filename: Optional[str],
    position: CursorPosition,
    editor_model: EditorModel,
    language: Optional[str] = None,
    technologies: Optional[Sequence[str]] = None,
    external_context: Optional[Any] = None,
) -> CompletionMetadata:
    """
    Describe the code around the cursor

    Accessor errors propagate to the caller unchanged.

    Args:
        filename: Name of the file being edited
        position: Cursor position in the editor model
        editor_model: Document the position refers to
        language: Programming language of the file
        technologies: Frameworks/libraries in use, in priority order
        external_context: Extra context supplied by the caller

    Returns:
        Frozen CompletionMetadata
    """
    text_before_cursor = get_text_before_cursor(position, editor_model)
    text_after_cursor = get_text_after_cursor(position, editor_model)

    return CompletionMetadata(
        filename=filename,
        language=language,
        technologies=tuple(technologies or ()),
        external_context=external_context,
        text_before_cursor=text_before_cursor,
        text_after_cursor=text_after_cursor,
        editor_state=EditorState(
            completion_mode=determine_completion_mode(text_before_cursor, text_after_cursor)
        ),
    )
