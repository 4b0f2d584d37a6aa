"""Tests for the completions, models and embeddings endpoints."""

import json

import httpx
import pytest

from mistral_sdk import (
    ApiError,
    ChatCompletionRequest,
    ChatMessage,
    EmbeddingRequest,
    ErrorClass,
    SerializationError,
    TransportError,
)
from mistral_sdk.types import ChatRole


def _chat_request(**kwargs) -> ChatCompletionRequest:
    return ChatCompletionRequest(
        model="m",
        messages=[ChatMessage.user("Hello")],
        **kwargs,
    )


class _BrokenStream(httpx.AsyncByteStream):
    """Response body that fails after its first chunk."""

    def __init__(self, first: bytes) -> None:
        self._first = first

    async def __aiter__(self):
        yield self._first
        raise httpx.ReadError("connection reset")


class TestCompletionsEndpoint:
    """Tests for chat completions."""

    @pytest.mark.asyncio
    async def test_get_completion(self, make_client, completion_payload) -> None:
        """Test a successful completion maps the payload exactly."""
        client, handler, _ = make_client(lambda r: httpx.Response(200, json=completion_payload))

        response = await client.completions.get_completion(_chat_request())

        request = handler.last
        assert request.method == "POST"
        assert str(request.url) == "https://api.mistral.ai/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer test-key"
        assert request.headers["Content-Type"] == "application/json"
        assert handler.last_json() == {
            "model": "m",
            "messages": [{"role": "user", "content": "Hello"}],
        }

        assert response.id == "x"
        assert response.model == "m"
        assert response.created == 1702256327
        assert len(response.choices) == 1
        assert response.choices[0].message.role == ChatRole.ASSISTANT
        assert response.choices[0].message.content == "Hello there"
        assert response.choices[0].finish_reason == "stop"
        assert response.usage.total_tokens == 7
        assert response.model_dump(exclude_none=True, mode="json") == completion_payload

    @pytest.mark.asyncio
    async def test_unauthorized(self, make_client) -> None:
        """Test a 401 surfaces as an ApiError with status and message."""
        client, _, _ = make_client(
            lambda r: httpx.Response(401, json={"message": "unauthorized"})
        )

        with pytest.raises(ApiError) as exc_info:
            await client.completions.get_completion(_chat_request())

        error = exc_info.value
        assert error.status_code == 401
        assert error.message == "unauthorized"
        assert error.error_class == ErrorClass.AUTHENTICATION
        assert error.raw_error == {"message": "unauthorized"}

    @pytest.mark.asyncio
    async def test_stream_flag_dropped(self, make_client, completion_payload) -> None:
        """Test get_completion never asks for a streamed body."""
        client, handler, _ = make_client(lambda r: httpx.Response(200, json=completion_payload))

        await client.completions.get_completion(_chat_request(stream=True))

        assert "stream" not in handler.last_json()

    @pytest.mark.asyncio
    async def test_malformed_success_body(self, make_client) -> None:
        """Test an unusable 2xx body is a SerializationError, not an ApiError."""
        client, _, _ = make_client(lambda r: httpx.Response(200, text="not json"))

        with pytest.raises(SerializationError) as exc_info:
            await client.completions.get_completion(_chat_request())
        assert not isinstance(exc_info.value, ApiError)

    @pytest.mark.asyncio
    async def test_connection_failure(self, make_client) -> None:
        """Test network failures surface as TransportError."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, _, _ = make_client(refuse)

        with pytest.raises(TransportError) as exc_info:
            await client.completions.get_completion(_chat_request())

        assert exc_info.value.url == "https://api.mistral.ai/v1/chat/completions"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert "Connection failed" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout(self, make_client) -> None:
        """Test timeouts surface as TransportError."""

        def slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client, _, _ = make_client(slow)

        with pytest.raises(TransportError, match="timed out"):
            await client.completions.get_completion(_chat_request())

    @pytest.mark.asyncio
    async def test_stream_completion(self, make_client) -> None:
        """Test streamed chunks are yielded until [DONE]."""
        chunks = [
            {"id": "s", "choices": [{"index": 0, "delta": {"role": "assistant", "content": "Hel"}}]},
            {"id": "s", "choices": [{"index": 0, "delta": {"content": "lo"}, "finish_reason": "stop"}]},
        ]
        body = "".join(f"data: {json.dumps(c)}\n\n" for c in chunks) + "data: [DONE]\n\n"
        client, handler, _ = make_client(
            lambda r: httpx.Response(
                200, text=body, headers={"Content-Type": "text/event-stream"}
            )
        )

        received = [c async for c in client.completions.stream_completion(_chat_request())]

        assert handler.last_json()["stream"] is True
        assert handler.last.headers["Accept"] == "text/event-stream"
        assert [c.choices[0].delta.content for c in received] == ["Hel", "lo"]
        assert received[-1].choices[0].finish_reason == "stop"

    @pytest.mark.asyncio
    async def test_stream_completion_error(self, make_client) -> None:
        """Test a rejected stream raises ApiError before any chunk."""
        client, _, _ = make_client(
            lambda r: httpx.Response(429, json={"message": "slow down"})
        )

        with pytest.raises(ApiError) as exc_info:
            async for _ in client.completions.stream_completion(_chat_request()):
                pass
        assert exc_info.value.status_code == 429
        assert exc_info.value.retryable

    @pytest.mark.asyncio
    async def test_stream_interrupted(self, make_client) -> None:
        """Test a connection lost mid-stream surfaces as TransportError."""
        first = {"id": "s", "choices": [{"index": 0, "delta": {"content": "Hel"}}]}
        client, _, _ = make_client(
            lambda r: httpx.Response(
                200,
                headers={"Content-Type": "text/event-stream"},
                stream=_BrokenStream(f"data: {json.dumps(first)}\n\n".encode()),
            )
        )

        received = []
        with pytest.raises(TransportError) as exc_info:
            async for chunk in client.completions.stream_completion(_chat_request()):
                received.append(chunk)

        assert [c.choices[0].delta.content for c in received] == ["Hel"]
        assert isinstance(exc_info.value.__cause__, httpx.ReadError)
        assert exc_info.value.url == "https://api.mistral.ai/v1/chat/completions"

    @pytest.mark.asyncio
    async def test_json_string_error_body(self, make_client) -> None:
        """Test a bare JSON string error body is kept as the message."""
        client, _, _ = make_client(lambda r: httpx.Response(429, json="Rate limit exceeded"))

        with pytest.raises(ApiError) as exc_info:
            await client.completions.get_completion(_chat_request())

        assert exc_info.value.status_code == 429
        assert exc_info.value.message == "Rate limit exceeded"
        assert exc_info.value.raw_error == {"body": "Rate limit exceeded"}

    @pytest.mark.asyncio
    async def test_json_list_error_body(self, make_client) -> None:
        """Test a bare JSON list error body keeps the payload."""
        body = [{"msg": "field required", "loc": ["body", "model"]}]
        client, _, _ = make_client(lambda r: httpx.Response(422, json=body))

        with pytest.raises(ApiError) as exc_info:
            await client.completions.get_completion(_chat_request())

        assert exc_info.value.status_code == 422
        assert exc_info.value.message == "field required"
        assert exc_info.value.raw_error == {"body": body}


class TestModelsEndpoint:
    """Tests for model listing."""

    @pytest.mark.asyncio
    async def test_list_models(self, make_client) -> None:
        """Test listing models issues a bodiless GET."""
        payload = {
            "object": "list",
            "data": [
                {"id": "mistral-tiny", "object": "model", "owned_by": "mistralai"},
                {"id": "mistral-embed", "object": "model", "owned_by": "mistralai"},
            ],
        }
        client, handler, _ = make_client(lambda r: httpx.Response(200, json=payload))

        models = await client.models.list_models()

        assert handler.last.method == "GET"
        assert str(handler.last.url) == "https://api.mistral.ai/v1/models"
        assert handler.last.content == b""
        assert "Content-Type" not in handler.last.headers
        assert models.ids == ["mistral-tiny", "mistral-embed"]
        assert models.data[0].owned_by == "mistralai"

    @pytest.mark.asyncio
    async def test_get_model(self, make_client) -> None:
        """Test fetching one model by id."""
        client, handler, _ = make_client(
            lambda r: httpx.Response(200, json={"id": "mistral-tiny", "object": "model"})
        )

        model = await client.models.get_model("mistral-tiny")

        assert str(handler.last.url) == "https://api.mistral.ai/v1/models/mistral-tiny"
        assert model.id == "mistral-tiny"

    @pytest.mark.asyncio
    async def test_get_model_not_found(self, make_client) -> None:
        """Test unknown models raise a 404 ApiError."""
        client, _, _ = make_client(
            lambda r: httpx.Response(404, json={"detail": "Model not found"})
        )

        with pytest.raises(ApiError) as exc_info:
            await client.models.get_model("nope")
        assert exc_info.value.error_class == ErrorClass.NOT_FOUND
        assert exc_info.value.message == "Model not found"

    @pytest.mark.asyncio
    async def test_get_model_empty_id(self, make_client) -> None:
        """Test an empty id is rejected locally."""
        client, handler, _ = make_client(lambda r: httpx.Response(200, json={}))

        with pytest.raises(ValueError):
            await client.models.get_model("")
        assert handler.requests == []


class TestEmbeddingsEndpoint:
    """Tests for embeddings."""

    @pytest.mark.asyncio
    async def test_get_embeddings(self, make_client) -> None:
        """Test embeddings round trip."""
        payload = {
            "id": "emb-1",
            "object": "list",
            "data": [
                {"object": "embedding", "embedding": [0.3, 0.4], "index": 1},
                {"object": "embedding", "embedding": [0.1, 0.2], "index": 0},
            ],
            "model": "mistral-embed",
            "usage": {"prompt_tokens": 4, "total_tokens": 4},
        }
        client, handler, _ = make_client(lambda r: httpx.Response(200, json=payload))

        response = await client.embeddings.get_embeddings(
            EmbeddingRequest(model="mistral-embed", input=["Hello", "World"])
        )

        assert str(handler.last.url) == "https://api.mistral.ai/v1/embeddings"
        assert handler.last_json() == {"model": "mistral-embed", "input": ["Hello", "World"]}
        assert response.model == "mistral-embed"
        assert response.vectors == [[0.1, 0.2], [0.3, 0.4]]
        assert response.data[0].dimensions == 2
        assert response.usage.prompt_tokens == 4

    @pytest.mark.asyncio
    async def test_server_error_plain_text(self, make_client) -> None:
        """Test non-JSON error bodies still carry a message."""
        client, _, _ = make_client(lambda r: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(ApiError) as exc_info:
            await client.embeddings.get_embeddings(
                EmbeddingRequest(model="mistral-embed", input=["x"])
            )
        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
