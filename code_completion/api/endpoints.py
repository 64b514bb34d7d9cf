"""API endpoints"""

from fastapi import Depends, HTTPException

from .app import (
    app,
    get_config,
    get_completion_client,
)
from ..core import CompletionClient, ConfigurationError, ErrorContext, handle_error
from ..core.constants import COMPLETION_MODEL_PROVIDERS
from ..models.api import (
    CompletionRequest,
    CompletionResponse,
    ModelInfo,
    ModelListResponse,
)
from ..models.completion import FetchCompletionItemParams
from ..models.config import AppConfig, CompletionModel
from ..models.editor import TextDocument
from ..utils import logger


@app.post("/v1/completions", response_model=CompletionResponse)
async def create_completion(
    request: CompletionRequest,
    config: AppConfig = Depends(get_config),
    client: CompletionClient = Depends(get_completion_client),
):
    """
    Complete the code at the given cursor position

    Returns {"completion": null} when no suggestion is available.
    """
    logger.generate_request_id()

    provider = request.provider or config.completion.default_provider
    provider_config = config.get_provider(provider)
    if provider_config is None:
        detail = handle_error(
            ConfigurationError(f"Provider '{provider.value}' is not configured"),
            ErrorContext.COMPLETION_ENDPOINT,
        )
        raise HTTPException(
            status_code=400,
            detail={"error": detail.model_dump()}
        )

    params = FetchCompletionItemParams(
        position=request.position,
        editor_model=TextDocument(request.text),
        api_key=provider_config.api_key,
        completion_model=request.model or config.completion.default_model,
        provider=provider,
        filename=request.filename,
        language=request.language,
        technologies=request.technologies,
        external_context=request.external_context,
    )

    completion = await client.fetch_completion_item(params)
    return CompletionResponse(completion=completion)


@app.get("/v1/models", response_model=ModelListResponse)
async def list_models(
    client: CompletionClient = Depends(get_completion_client),
):
    """List logical completion models and the provider model ids they map to"""
    return ModelListResponse(
        data=[
            ModelInfo(
                id=model.value,
                provider=COMPLETION_MODEL_PROVIDERS[model].value,
                model_id=client.get_model_id(model),
            )
            for model in CompletionModel
        ]
    )
