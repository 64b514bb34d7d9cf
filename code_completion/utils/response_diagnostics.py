"""Response diagnostics utilities for analyzing provider responses"""

from typing import Dict, Any
from enum import Enum


class ResponseType(Enum):
    """Shape of a provider response"""
    TEXT = "text"            # choices[0].message.content is a non-empty string
    BLANK = "blank"          # content present but empty or whitespace
    EMPTY = "empty"          # no choices, no message, or null content


class ResponseDiagnostics:
    """Helpers for classifying and logging raw provider responses"""

    @staticmethod
    def classify_response(response_data: Dict[str, Any]) -> ResponseType:
        """
        Classify a raw response

        Args:
            response_data: Decoded JSON response

        Returns:
            ResponseType enum value
        """
        content = ResponseDiagnostics.extract_response_content(response_data)["content"]
        if not isinstance(content, str):
            return ResponseType.EMPTY
        if not content.strip():
            return ResponseType.BLANK
        return ResponseType.TEXT

    @staticmethod
    def extract_response_content(response_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Pull the fields worth logging out of a raw response

        Args:
            response_data: Decoded JSON response

        Returns:
            Dict with has_choices, choices_count, content, role, finish_reason
        """
        extracted = {
            "has_choices": False,
            "choices_count": 0,
            "content": None,
            "role": None,
            "finish_reason": None,
        }

        if not isinstance(response_data, dict):
            return extracted

        choices = response_data.get("choices")
        if not choices or not isinstance(choices, list):
            return extracted

        extracted["has_choices"] = True
        extracted["choices_count"] = len(choices)

        first_choice = choices[0]
        if not isinstance(first_choice, dict):
            return extracted

        extracted["finish_reason"] = first_choice.get("finish_reason")

        message = first_choice.get("message")
        if not isinstance(message, dict):
            return extracted

        extracted["role"] = message.get("role")
        extracted["content"] = message.get("content")

        return extracted

    @staticmethod
    def truncate_for_logging(content: str, max_length: int = 2000) -> str:
        """
        Truncate content for logging

        Args:
            content: Original content
            max_length: Maximum length

        Returns:
            Content, with a [TRUNCATED] marker if it was cut
        """
        if not isinstance(content, str):
            return str(content)

        if len(content) <= max_length:
            return content

        return content[:max_length] + " [TRUNCATED]"
