"""Structured JSON logging"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Optional
import uuid
from contextvars import ContextVar


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class CompletionLogger:
    """Logger for completion request events"""

    def __init__(self, name: str = "code_completion"):
        """
        Initialize logger

        Args:
            name: Logger name
        """
        self.logger = logging.getLogger(name)

    @property
    def request_id(self) -> Optional[str]:
        """Request ID of the current task context"""
        return _request_id.get()

    def generate_request_id(self) -> str:
        """Generate new request ID scoped to the current task context"""
        request_id = str(uuid.uuid4())
        _request_id.set(request_id)
        return request_id

    def _log(self, level: int, message: str, **kwargs):
        extra = kwargs.copy()
        if self.request_id:
            extra["request_id"] = self.request_id

        self.logger.log(level, message, extra={"extra": extra})

    def info(self, message: str, **kwargs):
        """Log info message"""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message"""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message"""
        self._log(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message"""
        self._log(logging.DEBUG, message, **kwargs)

    def log_completion_request(
        self,
        provider: str,
        model: str,
        filename: Optional[str],
        completion_mode: str,
        **kwargs
    ):
        """
        Log an outgoing completion request

        Args:
            provider: Provider name
            model: Logical completion model
            filename: File the cursor is in
            completion_mode: fill-in-the-middle or completion
            **kwargs: Additional fields
        """
        self.debug(
            "Completion request sent",
            event_type="completion_request",
            provider=provider,
            model=model,
            filename=filename,
            completion_mode=completion_mode,
            **kwargs
        )

    def log_completion_result(
        self,
        provider: str,
        model: str,
        completion_length: int,
        **kwargs
    ):
        """
        Log a completion that came back with text

        Args:
            provider: Provider name
            model: Logical completion model
            completion_length: Number of characters in the suggestion
            **kwargs: Additional fields
        """
        self.info(
            "Completion received",
            event_type="completion_result",
            provider=provider,
            model=model,
            completion_length=completion_length,
            **kwargs
        )

    def log_completion_error(
        self,
        context: str,
        error_type: str,
        error_message: str,
        **kwargs
    ):
        """
        Log a reported completion failure

        Args:
            context: Error context tag
            error_type: Exception class name
            error_message: Error message
            **kwargs: Additional fields
        """
        self.error(
            "Completion error",
            event_type="completion_error",
            context=context,
            error_type=error_type,
            error_message=error_message,
            **kwargs
        )


def setup_logging(log_level: str = "INFO"):
    """
    Set up logging configuration

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    # Quieten third-party loggers
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# Global logger instance
logger = CompletionLogger()
