"""Tests for the HTTP transport and error reporting"""

import asyncio
import json
import logging

import httpx
import pytest

from conftest import RecordingHandler, make_provider_response
from code_completion.core import (
    CancellationToken,
    ErrorContext,
    HTTPClient,
    ProviderResponseError,
    RequestCancelledError,
    TransportError,
    handle_error,
    is_cancellation,
)
from code_completion.utils.logger import JSONFormatter, logger


def http_client(handler) -> HTTPClient:
    return HTTPClient(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestHTTPClient:
    """Test POST behaviour"""

    @pytest.mark.asyncio
    async def test_post_returns_json(self):
        handler = RecordingHandler()
        data = await http_client(handler).post(
            "https://example.test/v1/chat/completions",
            {"model": "m"},
            {"Authorization": "Bearer k"},
        )
        assert data == make_provider_response()
        assert json.loads(handler.requests[0].content) == {"model": "m"}

    @pytest.mark.asyncio
    async def test_error_status(self):
        handler = RecordingHandler({"error": "nope"}, status_code=500)
        with pytest.raises(ProviderResponseError) as exc_info:
            await http_client(handler).post("https://example.test", {}, {})
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_timeout(self):
        handler = RecordingHandler(raises=httpx.ReadTimeout("slow"))
        with pytest.raises(TransportError, match="timed out"):
            await http_client(handler).post("https://example.test", {}, {})

    @pytest.mark.asyncio
    async def test_missing_url(self):
        handler = RecordingHandler()
        with pytest.raises(TransportError):
            await http_client(handler).post(None, {}, {})
        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_cancelled_token(self):
        token = CancellationToken()
        token.cancel()
        with pytest.raises(RequestCancelledError):
            await http_client(RecordingHandler()).post("https://example.test", {}, {}, cancel_token=token)

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        client = http_client(RecordingHandler())
        await client.close()
        await client.close()


class TestErrorHandling:
    """Test error classification and reporting"""

    def test_is_cancellation(self):
        assert is_cancellation(RequestCancelledError())
        assert not is_cancellation(TransportError("down"))
        assert not is_cancellation(RuntimeError("Cancelled"))

    def test_handle_error_describes_failure(self):
        detail = handle_error(
            ProviderResponseError("bad gateway", status_code=502),
            ErrorContext.FETCH_COMPLETION_ITEM,
        )
        assert detail.type == "provider_response_error"
        assert detail.code == "502"
        assert detail.context == "fetch_completion_item"
        assert detail.message == "bad gateway"

    def test_handle_error_logs(self, caplog):
        with caplog.at_level(logging.ERROR, logger="code_completion"):
            handle_error(ValueError("boom"), ErrorContext.FETCH_COMPLETION_ITEM)

        record = caplog.records[-1]
        assert record.extra["event_type"] == "completion_error"
        assert record.extra["context"] == "fetch_completion_item"
        assert record.extra["error_type"] == "ValueError"

    def test_unknown_error_type(self):
        detail = handle_error(KeyError("choices"), ErrorContext.COMPLETION_ENDPOINT)
        assert detail.type == "internal_error"
        assert detail.code is None


class TestJSONFormatter:
    """Test structured log output"""

    def test_format_includes_extra_fields(self):
        record = logging.LogRecord(
            name="code_completion", level=logging.INFO, pathname=__file__, lineno=1,
            msg="Completion received", args=(), exc_info=None,
        )
        record.extra = {"provider": "groq", "completion_length": 12}

        data = json.loads(JSONFormatter().format(record))
        assert data["level"] == "INFO"
        assert data["message"] == "Completion received"
        assert data["provider"] == "groq"
        assert data["completion_length"] == 12


class TestRequestIds:
    """Test request id scoping"""

    @pytest.mark.asyncio
    async def test_concurrent_requests_keep_their_own_id(self):
        async def handle_request():
            request_id = logger.generate_request_id()
            await asyncio.sleep(0)
            return request_id, logger.request_id

        results = await asyncio.gather(handle_request(), handle_request())

        for generated, seen in results:
            assert generated == seen
        assert results[0][0] != results[1][0]

    def test_request_id_is_attached_to_records(self, caplog):
        async def handle_request():
            request_id = logger.generate_request_id()
            logger.info("Completion received")
            return request_id

        with caplog.at_level(logging.INFO, logger="code_completion"):
            request_id = asyncio.run(handle_request())

        assert caplog.records[-1].extra["request_id"] == request_id
