"""FastAPI application setup"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from ..core import (
    load_config,
    validate_config,
    CompletionClient,
    HTTPClient,
)
from ..models.config import AppConfig
from ..models.api import ErrorResponse, ErrorDetail
from ..utils import setup_logging, logger


# Global instances
app_config: Optional[AppConfig] = None
completion_client: Optional[CompletionClient] = None


def create_completion_client(config: AppConfig) -> CompletionClient:
    """Build a client whose tables and defaults reflect the configuration"""
    client = CompletionClient(
        http_client=HTTPClient(),
        debug_mode=config.system.debug_mode,
        timeouts={p.name: p.timeout for p in config.providers},
    )
    client.default_params.update(
        temperature=config.completion.temperature,
        max_tokens=config.completion.max_tokens,
    )
    for provider in config.providers:
        if provider.endpoint:
            client.endpoints[provider.name] = provider.endpoint
    return client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    global app_config, completion_client

    app_config = load_config()
    validate_config(app_config)

    setup_logging(app_config.system.log_level)
    logger.info("Configuration loaded successfully",
                providers=len(app_config.providers),
                default_provider=app_config.completion.default_provider.value,
                default_model=app_config.completion.default_model.value)

    completion_client = create_completion_client(app_config)

    logger.info("Completion service started", port=app_config.system.port)

    yield

    logger.info("Shutting down completion service")
    await completion_client.close()
    logger.info("Completion service stopped")


app = FastAPI(
    title="Code Completion Service",
    description="Cursor-aware code completion backed by hosted LLM providers",
    version="0.1.0",
    lifespan=lifespan
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Dependency injection functions
def get_config() -> AppConfig:
    """Get application configuration"""
    return app_config


def get_completion_client() -> CompletionClient:
    """Get completion client"""
    return completion_client


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    error_response = ErrorResponse(
        error=ErrorDetail(
            message=str(exc),
            type="internal_error",
            code="500"
        )
    )
    return JSONResponse(
        status_code=500,
        content=error_response.model_dump()
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "code-completion",
        "version": "0.1.0"
    }
