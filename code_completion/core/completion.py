"""Completion request orchestration"""

from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from ..models.completion import (
    Completion,
    CompletionCreateParams,
    CompletionMetadata,
    FetchCompletionItemParams,
    Message,
)
from ..models.config import CompletionModel, Provider
from ..utils import logger
from ..utils.response_diagnostics import ResponseDiagnostics
from .constants import (
    COMPLETION_API_ENDPOINT,
    COMPLETION_MODEL_IDS,
    CONTENT_TYPE_JSON,
    DEFAULT_COMPLETION_CREATE_PARAMS,
)
from .errors import (
    ConfigurationError,
    EmptyCompletionError,
    ErrorContext,
    ProviderResponseError,
    handle_error,
    is_cancellation,
)
from .metadata import construct_completion_metadata
from .prompt import generate_system_prompt, generate_user_prompt
from .transport import HTTPClient


ErrorHandler = Callable[[BaseException, ErrorContext], Any]


def create_headers(api_key: str) -> Dict[str, str]:
    """Build provider request headers"""
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": CONTENT_TYPE_JSON,
    }


def extract_completion_text(response_data: Dict[str, Any]) -> str:
    """
    Unwrap choices[0].message.content from a provider response

    Raises:
        ProviderResponseError: If the response does not match the expected shape
        EmptyCompletionError: If there is no first choice or it has no content
    """
    try:
        completion = Completion.model_validate(response_data)
    except ValidationError as e:
        raise ProviderResponseError(f"Malformed completion response: {e}") from e

    if not completion.choices:
        raise EmptyCompletionError("Provider returned no choices")

    message = completion.choices[0].message
    if message is None or message.content is None:
        raise EmptyCompletionError("First choice has no message content")

    return message.content


def _name(value: Any) -> str:
    return getattr(value, "value", str(value))


class CompletionClient:
    """Turn cursor context into a single completion suggestion"""

    def __init__(
        self,
        http_client: Optional[HTTPClient] = None,
        endpoints: Mapping[Provider, str] = COMPLETION_API_ENDPOINT,
        model_ids: Mapping[CompletionModel, str] = COMPLETION_MODEL_IDS,
        default_params: Mapping[str, Any] = DEFAULT_COMPLETION_CREATE_PARAMS,
        error_handler: ErrorHandler = handle_error,
        debug_mode: bool = False,
        timeouts: Optional[Mapping[Provider, float]] = None,
    ):
        """
        Initialize completion client

        Args:
            http_client: Transport used for provider calls
            endpoints: Provider -> endpoint URL table
            model_ids: Logical model -> provider model id table
            default_params: Creation parameters merged into every request body
            error_handler: Called once for every non-cancellation failure; its own
                errors are logged, not raised
            debug_mode: Log request shape and response classification
            timeouts: Per-provider request timeout overrides in seconds
        """
        self.http_client = http_client or HTTPClient()
        self.endpoints = dict(endpoints)
        self.model_ids = dict(model_ids)
        self.default_params = dict(default_params)
        self.error_handler = error_handler
        self.debug_mode = debug_mode
        self.timeouts = dict(timeouts or {})

    async def close(self):
        """Close the underlying transport"""
        await self.http_client.close()

    def get_endpoint(self, provider: Provider) -> str:
        url = self.endpoints.get(provider)
        if not url:
            raise ConfigurationError(f"No endpoint configured for provider '{_name(provider)}'")
        return url

    def get_model_id(self, model: CompletionModel) -> str:
        model_id = self.model_ids.get(model)
        if not model_id:
            raise ConfigurationError(f"No model id configured for model '{_name(model)}'")
        return model_id

    def create_request_body(
        self,
        metadata: CompletionMetadata,
        completion_model: CompletionModel,
    ) -> Dict[str, Any]:
        """Merge default parameters with the model id and the two prompt messages"""
        params = CompletionCreateParams(
            **{
                **self.default_params,
                "model": self.get_model_id(completion_model),
                "messages": [
                    Message(role="system", content=generate_system_prompt(metadata)),
                    Message(role="user", content=generate_user_prompt(metadata)),
                ],
            }
        )
        return params.model_dump(exclude_none=True)

    async def fetch_completion_item(self, params: FetchCompletionItemParams) -> Optional[str]:
        """
        Fetch one completion suggestion

        Never raises: cancellation resolves to None silently, every other
        failure is passed to the error handler and also resolves to None.

        Args:
            params: Cursor context, credentials, and model/provider selection

        Returns:
            Suggestion text, or None
        """
        try:
            metadata = construct_completion_metadata(
                filename=params.filename,
                position=params.position,
                editor_model=params.editor_model,
                language=params.language,
                technologies=params.technologies,
                external_context=params.external_context,
            )

            url = self.get_endpoint(params.provider)
            body = self.create_request_body(metadata, params.completion_model)
            headers = create_headers(params.api_key)

            logger.log_completion_request(
                provider=_name(params.provider),
                model=_name(params.completion_model),
                filename=params.filename,
                completion_mode=metadata.editor_state.completion_mode.value,
            )
            if self.debug_mode:
                logger.debug(
                    "Completion request body",
                    url=url,
                    body_keys=sorted(body),
                    user_prompt=ResponseDiagnostics.truncate_for_logging(body["messages"][1]["content"]),
                )

            response_data = await self.http_client.post(
                url,
                body,
                headers,
                cancel_token=params.cancel_token,
                timeout=self.timeouts.get(params.provider),
            )

            if self.debug_mode:
                logger.debug(
                    "Completion response received",
                    response_type=ResponseDiagnostics.classify_response(response_data).value,
                    **ResponseDiagnostics.extract_response_content(response_data),
                )

            completion = extract_completion_text(response_data)
            logger.log_completion_result(
                provider=_name(params.provider),
                model=_name(params.completion_model),
                completion_length=len(completion),
            )
            return completion

        except Exception as err:
            if is_cancellation(err):
                logger.debug("Completion request cancelled", provider=_name(params.provider))
                return None

            try:
                self.error_handler(err, ErrorContext.FETCH_COMPLETION_ITEM)
            except Exception as handler_err:
                logger.error(
                    "Error handler failed",
                    error_type=type(handler_err).__name__,
                    error_message=str(handler_err),
                    original_error=str(err),
                )
            return None


async def fetch_completion_item(
    params: FetchCompletionItemParams,
    client: Optional[CompletionClient] = None,
) -> Optional[str]:
    """
    Fetch a completion with a shared client, or a throwaway one if none is given
    """
    if client is not None:
        return await client.fetch_completion_item(params)

    client = CompletionClient()
    try:
        return await client.fetch_completion_item(params)
    finally:
        await client.close()
