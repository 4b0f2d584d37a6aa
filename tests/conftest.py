"""Root pytest fixtures for mistral-sdk tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from mistral_sdk import MistralClient

Handler = Callable[[httpx.Request], Any]


class RecordingHandler:
    """Mock API handler that records every request it serves."""

    def __init__(self, responder: Handler) -> None:
        self._responder = responder
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responder(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Callable[..., tuple[MistralClient, RecordingHandler, httpx.AsyncClient]]:
    """Build a client whose borrowed httpx client is backed by a mock handler."""

    def factory(
        responder: Handler,
        api_key: str = "test-key",
        **kwargs: Any,
    ) -> tuple[MistralClient, RecordingHandler, httpx.AsyncClient]:
        handler = RecordingHandler(responder)
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = MistralClient(api_key=api_key, client=http, environ={}, **kwargs)
        return client, handler, http

    return factory


@pytest.fixture
def completion_payload() -> dict[str, Any]:
    """A chat/completions success body."""
    return {
        "id": "x",
        "object": "chat.completion",
        "created": 1702256327,
        "model": "m",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Hello there"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7},
    }
