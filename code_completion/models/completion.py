"""Completion metadata, request and response models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Literal, Optional, Tuple, TYPE_CHECKING
from pydantic import BaseModel, Field

from .config import CompletionModel, Provider
from .editor import CursorPosition, EditorModel

if TYPE_CHECKING:
    from ..core.transport import CancellationToken


class CompletionMode(str, Enum):
    """How the suggestion relates to the surrounding code"""
    FILL_IN_THE_MIDDLE = "fill-in-the-middle"
    COMPLETION = "completion"


# ============================================================================
# Metadata
# ============================================================================

class EditorState(BaseModel):
    """Editor-derived state sent along with the metadata"""
    completion_mode: CompletionMode

    class Config:
        frozen = True


class CompletionMetadata(BaseModel):
    """Provider-agnostic description of what needs completing"""
    filename: Optional[str] = None
    language: Optional[str] = None
    technologies: Tuple[str, ...] = ()
    external_context: Optional[Any] = None
    text_before_cursor: str
    text_after_cursor: str
    editor_state: EditorState

    class Config:
        frozen = True


# ============================================================================
# Provider request / response
# ============================================================================

class Message(BaseModel):
    """Chat message sent to the provider"""
    role: Literal["system", "user"]
    content: str


class CompletionCreateParams(BaseModel):
    """Request body for an OpenAI-compatible chat completions endpoint"""
    model: str
    messages: List[Message]
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_tokens: Optional[int] = Field(default=None, ge=1)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    stop: Optional[List[str]] = None

    class Config:
        extra = "allow"  # provider-specific defaults pass through untouched


class ChoiceMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class Choice(BaseModel):
    index: int = 0
    message: Optional[ChoiceMessage] = None
    finish_reason: Optional[str] = None


class Completion(BaseModel):
    """Provider response; only choices[0].message.content is read"""
    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[Choice] = Field(default_factory=list)


# ============================================================================
# Orchestrator input
# ============================================================================

@dataclass(frozen=True)
class FetchCompletionItemParams:
    """Everything needed for one completion request"""
    position: CursorPosition
    editor_model: EditorModel
    api_key: str
    completion_model: CompletionModel
    provider: Provider
    filename: Optional[str] = None
    language: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    external_context: Optional[Any] = None
    cancel_token: Optional["CancellationToken"] = None
