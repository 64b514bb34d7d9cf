"""Prompt generation for completion requests"""

import json
from typing import Any, Optional

from ..models.completion import CompletionMetadata, CompletionMode


CURSOR_MARKER = "<cursor>"

MODE_INSTRUCTIONS = {
    CompletionMode.FILL_IN_THE_MIDDLE: (
        f"Generate the code that belongs at {CURSOR_MARKER}. It must connect the "
        "code before the cursor with the code after it, without repeating either side."
    ),
    CompletionMode.COMPLETION: (
        f"Continue the code from {CURSOR_MARKER}. Write only the code that comes next."
    ),
}


def _join_technologies(technologies) -> str:
    if not technologies:
        return ""
    if len(technologies) == 1:
        return technologies[0]
    return ", ".join(technologies[:-1]) + " and " + technologies[-1]


def _format_external_context(external_context: Optional[Any]) -> str:
    if external_context is None or external_context == "":
        return ""
    if isinstance(external_context, str):
        return external_context
    return json.dumps(external_context, indent=2, sort_keys=True, default=str)


def generate_system_prompt(metadata: CompletionMetadata) -> str:
    """Describe the assistant's role for the given language and stack"""
    language = metadata.language or "software"
    prompt = f"You are an expert {language} code completion assistant"

    technologies = _join_technologies(metadata.technologies)
    if technologies:
        prompt += f" with deep knowledge of {technologies}"

    return (
        prompt + ". You return only raw code to insert at the cursor: no explanations, "
        "no markdown fences, and no code that already exists around the cursor."
    )


def generate_user_prompt(metadata: CompletionMetadata) -> str:
    """Render the code around the cursor together with mode-specific instructions"""
    sections = []

    if metadata.filename:
        sections.append(f"File: {metadata.filename}")

    external = _format_external_context(metadata.external_context)
    if external:
        sections.append(f"Additional context:\n{external}")

    sections.append(MODE_INSTRUCTIONS[metadata.editor_state.completion_mode])

    language = (metadata.language or "").lower()
    sections.append(
        f"```{language}\n"
        f"{metadata.text_before_cursor}{CURSOR_MARKER}{metadata.text_after_cursor}\n"
        "```"
    )

    return "\n\n".join(sections)
