"""Shared fixtures for the completion client tests"""

import json

import httpx
import pytest

from code_completion.core import CompletionClient, HTTPClient
from code_completion.models import (
    CompletionModel,
    CursorPosition,
    FetchCompletionItemParams,
    Provider,
    TextDocument,
)


def make_provider_response(content="X"):
    """Build an OpenAI-compatible chat completion payload"""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "llama3-70b-8192",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop"
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 1, "total_tokens": 11}
    }


class RecordingHandler:
    """MockTransport handler that records requests and replays a fixed response"""

    def __init__(self, response=None, status_code=200, raises=None):
        self.response = make_provider_response() if response is None else response
        self.status_code = status_code
        self.raises = raises
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raises is not None:
            raise self.raises
        if isinstance(self.response, (bytes, str)):
            return httpx.Response(self.status_code, content=self.response)
        return httpx.Response(self.status_code, json=self.response)

    @property
    def bodies(self):
        return [json.loads(r.content) for r in self.requests]


class ErrorRecorder:
    """Stand-in for the centralized error handler"""

    def __init__(self):
        self.calls = []

    def __call__(self, error, context):
        self.calls.append((error, context))


def build_client(handler, error_handler=None, **kwargs) -> CompletionClient:
    transport = httpx.MockTransport(handler)
    return CompletionClient(
        http_client=HTTPClient(client=httpx.AsyncClient(transport=transport)),
        error_handler=error_handler or ErrorRecorder(),
        **kwargs
    )


def build_params(text="foo()", line_number=1, column=5, **overrides) -> FetchCompletionItemParams:
    values = dict(
        position=CursorPosition(line_number=line_number, column=column),
        editor_model=TextDocument(text),
        api_key="sk-test-123",
        completion_model=CompletionModel.LLAMA_3_70B,
        provider=Provider.GROQ,
        filename="main.py",
        language="python",
        technologies=["fastapi", "pydantic"],
        external_context=None,
    )
    values.update(overrides)
    return FetchCompletionItemParams(**values)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def error_recorder():
    return ErrorRecorder()
