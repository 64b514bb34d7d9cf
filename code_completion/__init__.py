"""Cursor-aware code completion client for hosted LLM providers"""

__version__ = "0.1.0"
