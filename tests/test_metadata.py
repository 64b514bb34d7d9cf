"""Tests for completion metadata construction"""

import pytest

from code_completion.core import construct_completion_metadata, determine_completion_mode
from code_completion.models import (
    CompletionMode,
    CursorPosition,
    EditorRange,
    TextDocument,
)
from code_completion.utils.text import get_text_after_cursor, get_text_before_cursor


def build(text, line_number, column, **kwargs):
    return construct_completion_metadata(
        filename=kwargs.pop("filename", "app.ts"),
        position=CursorPosition(line_number=line_number, column=column),
        editor_model=TextDocument(text),
        **kwargs
    )


class TestCompletionMode:
    """Test completion mode selection"""

    @pytest.mark.parametrize("before, after, expected", [
        ("foo(", ")", CompletionMode.FILL_IN_THE_MIDDLE),
        ("foo(", "", CompletionMode.COMPLETION),
        ("", ")", CompletionMode.COMPLETION),
        ("", "", CompletionMode.COMPLETION),
    ])
    def test_mode_from_surrounding_text(self, before, after, expected):
        assert determine_completion_mode(before, after) == expected

    def test_whitespace_counts_as_context(self):
        assert determine_completion_mode("x = ", "\n") == CompletionMode.FILL_IN_THE_MIDDLE

    def test_cursor_inside_call_is_fill_in_the_middle(self):
        metadata = build("foo()", 1, 5)
        assert metadata.text_before_cursor == "foo("
        assert metadata.text_after_cursor == ")"
        assert metadata.editor_state.completion_mode == CompletionMode.FILL_IN_THE_MIDDLE

    def test_cursor_at_end_is_completion(self):
        metadata = build("foo(", 1, 5)
        assert metadata.text_before_cursor == "foo("
        assert metadata.text_after_cursor == ""
        assert metadata.editor_state.completion_mode == CompletionMode.COMPLETION

    def test_cursor_at_start_is_completion(self):
        metadata = build("def main():\n    pass", 1, 1)
        assert metadata.text_before_cursor == ""
        assert metadata.editor_state.completion_mode == CompletionMode.COMPLETION

    def test_empty_document_is_completion(self):
        metadata = build("", 1, 1)
        assert metadata.text_before_cursor == ""
        assert metadata.text_after_cursor == ""
        assert metadata.editor_state.completion_mode == CompletionMode.COMPLETION


class TestMetadataContents:
    """Test metadata fields"""

    def test_fields_are_carried_over(self):
        metadata = build(
            "import React from 'react';\n",
            2, 1,
            filename="App.tsx",
            language="typescript",
            technologies=["react", "tailwindcss"],
            external_context={"path": "src/utils.ts"},
        )
        assert metadata.filename == "App.tsx"
        assert metadata.language == "typescript"
        assert metadata.technologies == ("react", "tailwindcss")
        assert metadata.external_context == {"path": "src/utils.ts"}
        assert metadata.text_before_cursor == "import React from 'react';\n"

    def test_metadata_is_deterministic(self):
        first = build("a = [1, 2]\nb = a", 2, 4, language="python", technologies=["numpy"])
        second = build("a = [1, 2]\nb = a", 2, 4, language="python", technologies=["numpy"])
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_metadata_is_frozen(self):
        metadata = build("x", 1, 2)
        with pytest.raises(Exception):
            metadata.filename = "other.py"

    def test_technologies_input_not_mutated(self):
        technologies = ["django"]
        build("x", 1, 2, technologies=technologies)
        assert technologies == ["django"]

    def test_accessor_errors_propagate(self):
        class BrokenModel:
            def get_value_in_range(self, editor_range):
                raise RuntimeError("model disposed")

            def get_line_count(self):
                return 1

            def get_line_max_column(self, line_number):
                return 1

        with pytest.raises(RuntimeError, match="model disposed"):
            construct_completion_metadata(
                filename="a.py",
                position=CursorPosition(line_number=1, column=1),
                editor_model=BrokenModel(),
            )


class TestTextDocument:
    """Test the in-memory editor model and cursor accessors"""

    def test_multiline_split(self):
        document = TextDocument("def f():\n    return 1\n")
        position = CursorPosition(line_number=2, column=5)
        assert get_text_before_cursor(position, document) == "def f():\n    "
        assert get_text_after_cursor(position, document) == "return 1\n"

    def test_line_count_and_max_column(self):
        document = TextDocument("ab\ncde")
        assert document.get_line_count() == 2
        assert document.get_line_max_column(1) == 3
        assert document.get_line_max_column(2) == 4

    def test_out_of_range_position_is_clamped(self):
        document = TextDocument("abc")
        position = CursorPosition(line_number=9, column=99)
        assert get_text_before_cursor(position, document) == "abc"
        assert get_text_after_cursor(position, document) == ""

    def test_inverted_range_is_empty(self):
        document = TextDocument("abc")
        editor_range = EditorRange(
            start_line_number=1, start_column=3,
            end_line_number=1, end_column=1,
        )
        assert document.get_value_in_range(editor_range) == ""

    def test_position_is_one_based(self):
        with pytest.raises(ValueError):
            CursorPosition(line_number=0, column=1)
