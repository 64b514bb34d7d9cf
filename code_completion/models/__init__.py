"""Data models for the completion client"""

from .editor import (
    CursorPosition,
    EditorRange,
    EditorModel,
    TextDocument,
)

from .config import (
    Provider,
    CompletionModel,
    ProviderConfig,
    SystemConfig,
    CompletionDefaults,
    AppConfig,
)

from .completion import (
    CompletionMode,
    EditorState,
    CompletionMetadata,
    Message,
    CompletionCreateParams,
    ChoiceMessage,
    Choice,
    Completion,
    FetchCompletionItemParams,
)

from .api import (
    CompletionRequest,
    CompletionResponse,
    ModelInfo,
    ModelListResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    # Editor models
    "CursorPosition",
    "EditorRange",
    "EditorModel",
    "TextDocument",
    # Config models
    "Provider",
    "CompletionModel",
    "ProviderConfig",
    "SystemConfig",
    "CompletionDefaults",
    "AppConfig",
    # Completion models
    "CompletionMode",
    "EditorState",
    "CompletionMetadata",
    "Message",
    "CompletionCreateParams",
    "ChoiceMessage",
    "Choice",
    "Completion",
    "FetchCompletionItemParams",
    # API models
    "CompletionRequest",
    "CompletionResponse",
    "ModelInfo",
    "ModelListResponse",
    "ErrorDetail",
    "ErrorResponse",
]
