"""HTTP API request and response models"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field

from .config import CompletionModel, Provider
from .editor import CursorPosition


class CompletionRequest(BaseModel):
    """Request model for the completions endpoint"""
    text: str
    position: CursorPosition
    filename: Optional[str] = None
    language: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    external_context: Optional[Any] = None
    model: Optional[CompletionModel] = None
    provider: Optional[Provider] = None


class CompletionResponse(BaseModel):
    """Suggestion text, or null when nothing is available"""
    completion: Optional[str] = None


class ModelInfo(BaseModel):
    """Model information"""
    id: str
    object: str = "model"
    provider: str
    model_id: str


class ModelListResponse(BaseModel):
    """Response for models list endpoint"""
    object: str = "list"
    data: List[ModelInfo]


class ErrorDetail(BaseModel):
    """Error detail information"""
    message: str
    type: str
    context: Optional[str] = None
    code: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response model"""
    error: ErrorDetail
