"""Async HTTP transport with cancellation support"""

import asyncio
from typing import Any, Dict, Optional

import httpx

from .errors import ProviderResponseError, RequestCancelledError, TransportError


class CancellationToken:
    """Caller-owned handle that aborts an in-flight request"""

    def __init__(self):
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()


class HTTPClient:
    """Thin POST client over httpx.AsyncClient"""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize transport

        Args:
            client: Pre-built httpx client (tests pass one with a MockTransport)
            timeout: Request timeout in seconds when the client is created lazily
        """
        self._client = client
        self.timeout = timeout

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True
            )
        return self._client

    async def close(self):
        """Close HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def post(
        self,
        url: Optional[str],
        body: Dict[str, Any],
        headers: Dict[str, str],
        cancel_token: Optional[CancellationToken] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        POST a JSON body and return the decoded JSON response

        Raises:
            RequestCancelledError: If the token fires before the response arrives
            TransportError: On connection failures, timeouts, or a missing URL
            ProviderResponseError: On non-2xx status or a non-JSON body
        """
        if cancel_token is not None and cancel_token.cancelled:
            raise RequestCancelledError("Request cancelled before it was sent")

        if not url:
            raise TransportError("No endpoint URL to send the request to")

        client = await self._get_http_client()
        kwargs: Dict[str, Any] = {"json": body, "headers": headers}
        if timeout is not None:
            kwargs["timeout"] = timeout
        if cancel_token is None:
            response = await self._send(client, url, kwargs)
        else:
            response = await self._send_cancellable(client, url, kwargs, cancel_token)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderResponseError(
                f"Provider API error: {e.response.status_code} - {e.response.text}",
                status_code=e.response.status_code,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise ProviderResponseError(
                f"Provider returned invalid JSON: {e}",
                status_code=response.status_code,
            ) from e

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: str,
        kwargs: Dict[str, Any],
    ) -> httpx.Response:
        try:
            return await client.post(url, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to '{url}' timed out") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"Failed to connect to '{url}': {e}") from e

    async def _send_cancellable(
        self,
        client: httpx.AsyncClient,
        url: str,
        kwargs: Dict[str, Any],
        cancel_token: CancellationToken,
    ) -> httpx.Response:
        request_task = asyncio.ensure_future(self._send(client, url, kwargs))
        cancel_task = asyncio.ensure_future(cancel_token.wait())
        try:
            await asyncio.wait(
                {request_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()

        if not request_task.done() or request_task.cancelled():
            # Let the aborted request unwind before reporting the cancellation
            await asyncio.gather(request_task, return_exceptions=True)
            raise RequestCancelledError("Request cancelled")
        return request_task.result()
