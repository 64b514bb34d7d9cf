"""Error taxonomy and centralized error reporting"""

from enum import Enum
from typing import Optional

from ..models.api import ErrorDetail
from ..utils import logger


class ErrorContext(str, Enum):
    """Where a reported error originated"""
    FETCH_COMPLETION_ITEM = "fetch_completion_item"
    COMPLETION_ENDPOINT = "completion_endpoint"


class CompletionError(Exception):
    """Base class for completion failures"""
    error_type = "completion_error"


class ConfigurationError(CompletionError):
    """Unknown provider or model, or an incomplete lookup table"""
    error_type = "configuration_error"


class TransportError(CompletionError):
    """Network failure or timeout while talking to the provider"""
    error_type = "transport_error"


class ProviderResponseError(CompletionError):
    """Provider answered with a non-2xx status or an unreadable body"""
    error_type = "provider_response_error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyCompletionError(CompletionError):
    """Provider response carried no usable choice"""
    error_type = "empty_completion"


class RequestCancelledError(CompletionError):
    """In-flight request was aborted by its cancellation token"""
    error_type = "cancelled"


def is_cancellation(error: BaseException) -> bool:
    """Return True if the error represents a cancelled request"""
    return isinstance(error, RequestCancelledError)


def handle_error(error: BaseException, context: ErrorContext) -> ErrorDetail:
    """
    Report an error to the log and describe it

    Args:
        error: The failure to report
        context: Where the failure happened

    Returns:
        ErrorDetail describing the failure
    """
    error_type = getattr(error, "error_type", "internal_error")
    status_code = getattr(error, "status_code", None)

    logger.log_completion_error(
        context=context.value,
        error_type=type(error).__name__,
        error_message=str(error),
        status_code=status_code,
    )

    return ErrorDetail(
        message=str(error) or type(error).__name__,
        type=error_type,
        context=context.value,
        code=str(status_code) if status_code is not None else None,
    )
