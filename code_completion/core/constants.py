"""Static provider and model tables"""

from types import MappingProxyType
from typing import Any, Mapping

from ..models.config import CompletionModel, Provider
from .errors import ConfigurationError


COMPLETION_API_ENDPOINT: Mapping[Provider, str] = MappingProxyType({
    Provider.GROQ: "https://api.groq.com/openai/v1/chat/completions",
    Provider.OPENAI: "https://api.openai.com/v1/chat/completions",
})

COMPLETION_MODEL_IDS: Mapping[CompletionModel, str] = MappingProxyType({
    CompletionModel.LLAMA_3_70B: "llama3-70b-8192",
    CompletionModel.GPT_4O: "gpt-4o-2024-08-06",
    CompletionModel.GPT_4O_MINI: "gpt-4o-mini",
})

COMPLETION_MODEL_PROVIDERS: Mapping[CompletionModel, Provider] = MappingProxyType({
    CompletionModel.LLAMA_3_70B: Provider.GROQ,
    CompletionModel.GPT_4O: Provider.OPENAI,
    CompletionModel.GPT_4O_MINI: Provider.OPENAI,
})

DEFAULT_COMPLETION_CREATE_PARAMS: Mapping[str, Any] = MappingProxyType({
    "temperature": 0.3,
    "max_tokens": 256,
})

CONTENT_TYPE_JSON = "application/json"


def validate_static_tables(
    endpoints: Mapping[Provider, str] = COMPLETION_API_ENDPOINT,
    model_ids: Mapping[CompletionModel, str] = COMPLETION_MODEL_IDS,
) -> None:
    """
    Check that every provider and model has a non-empty table entry

    Raises:
        ConfigurationError: Listing every missing entry
    """
    missing = [
        f"endpoint for provider '{p.value}'"
        for p in Provider if not endpoints.get(p)
    ]
    missing += [
        f"model id for model '{m.value}'"
        for m in CompletionModel if not model_ids.get(m)
    ]
    missing += [
        f"provider for model '{m.value}'"
        for m in CompletionModel if m not in COMPLETION_MODEL_PROVIDERS
    ]
    if missing:
        raise ConfigurationError("Missing " + ", ".join(missing))


validate_static_tables()
