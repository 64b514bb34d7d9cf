"""Core completion components"""

from .errors import (
    ErrorContext,
    CompletionError,
    ConfigurationError,
    TransportError,
    ProviderResponseError,
    EmptyCompletionError,
    RequestCancelledError,
    handle_error,
    is_cancellation,
)
from .constants import (
    COMPLETION_API_ENDPOINT,
    COMPLETION_MODEL_IDS,
    DEFAULT_COMPLETION_CREATE_PARAMS,
    validate_static_tables,
)
from .config_loader import ConfigLoader, load_config
from .config_validator import ConfigValidator, validate_config
from .transport import CancellationToken, HTTPClient
from .metadata import construct_completion_metadata, determine_completion_mode
from .prompt import generate_system_prompt, generate_user_prompt
from .completion import (
    CompletionClient,
    create_headers,
    extract_completion_text,
    fetch_completion_item,
)

__all__ = [
    "ErrorContext",
    "CompletionError",
    "ConfigurationError",
    "TransportError",
    "ProviderResponseError",
    "EmptyCompletionError",
    "RequestCancelledError",
    "handle_error",
    "is_cancellation",
    "COMPLETION_API_ENDPOINT",
    "COMPLETION_MODEL_IDS",
    "DEFAULT_COMPLETION_CREATE_PARAMS",
    "validate_static_tables",
    "ConfigLoader",
    "load_config",
    "ConfigValidator",
    "validate_config",
    "CancellationToken",
    "HTTPClient",
    "construct_completion_metadata",
    "determine_completion_mode",
    "generate_system_prompt",
    "generate_user_prompt",
    "CompletionClient",
    "create_headers",
    "extract_completion_text",
    "fetch_completion_item",
]
