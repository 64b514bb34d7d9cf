"""Utility functions and helpers"""

from .logger import setup_logging, logger, CompletionLogger

__all__ = ["setup_logging", "logger", "CompletionLogger"]
