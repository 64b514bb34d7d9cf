"""Configuration data models"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class Provider(str, Enum):
    """Completion API providers"""
    GROQ = "groq"
    OPENAI = "openai"


class CompletionModel(str, Enum):
    """Logical completion models exposed to callers"""
    LLAMA_3_70B = "llama-3-70b"
    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"


class ProviderConfig(BaseModel):
    """Credentials and transport settings for one provider"""
    name: Provider
    api_key: str
    endpoint: Optional[str] = None  # overrides the built-in endpoint
    timeout: float = Field(default=30.0, gt=0)

    @field_validator('endpoint')
    @classmethod
    def validate_endpoint(cls, v: Optional[str]) -> Optional[str]:
        """Validate endpoint URL format"""
        if v is not None and not v.startswith(('http://', 'https://')):
            raise ValueError('endpoint must start with http:// or https://')
        return v

    @field_validator('api_key')
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('api_key must not be empty')
        return v

    class Config:
        validate_assignment = True


class SystemConfig(BaseModel):
    """System-level configuration"""
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = "INFO"
    debug_mode: bool = Field(
        default=False,
        description="Log request shapes and response classification"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f'log_level must be one of {valid_levels}')
        return v_upper

    class Config:
        validate_assignment = True


class CompletionDefaults(BaseModel):
    """Defaults applied to every completion request"""
    default_provider: Provider = Provider.GROQ
    default_model: CompletionModel = CompletionModel.LLAMA_3_70B
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=256, ge=1)

    class Config:
        validate_assignment = True


class AppConfig(BaseModel):
    """Complete application configuration"""
    system: SystemConfig = Field(default_factory=SystemConfig)
    completion: CompletionDefaults = Field(default_factory=CompletionDefaults)
    providers: List[ProviderConfig]

    @field_validator('providers')
    @classmethod
    def validate_providers(cls, v: List[ProviderConfig]) -> List[ProviderConfig]:
        """Validate providers list is not empty"""
        if not v:
            raise ValueError('At least one provider must be configured')
        return v

    def get_provider(self, name: Provider) -> Optional[ProviderConfig]:
        """Get provider configuration by name"""
        for provider in self.providers:
            if provider.name == name:
                return provider
        return None

    class Config:
        validate_assignment = True
