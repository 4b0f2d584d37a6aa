"""
Chat completion endpoint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mistral_sdk.endpoints.base import BaseEndpoint
from mistral_sdk.types.completions import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class CompletionsEndpoint(BaseEndpoint):
    """Text generation through the chat/completions endpoint.

    Example:
        >>> request = ChatCompletionRequest(
        ...     model="mistral-small-latest",
        ...     messages=[ChatMessage.user("Hello!")],
        ... )
        >>> response = await client.completions.get_completion(request)
        >>> print(response.content)
    """

    endpoint = "chat/completions"

    async def get_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Generate a chat completion.

        A ``stream`` flag on the request is dropped; use
        ``stream_completion`` for streamed output.

        Args:
            request: Completion request

        Returns:
            ChatCompletionResponse

        Raises:
            ApiError: If the API rejects the request
            TransportError: On network failure
            SerializationError: If the response body is unusable
        """
        if request.stream:
            request = request.model_copy(update={"stream": None})
        return await self._context.send(
            "POST", self._path(), ChatCompletionResponse, body=request
        )

    async def stream_completion(
        self, request: ChatCompletionRequest
    ) -> AsyncIterator[ChatCompletionChunk]:
        """Generate a chat completion as a stream of chunks.

        Chunks are yielded as the server sends them; nothing is merged.

        Example:
            >>> async for chunk in client.completions.stream_completion(request):
            ...     print(chunk.choices[0].delta.content or "", end="")
        """
        request = request.model_copy(update={"stream": True})
        policy = self._context.policy
        async with self._context.stream(self._path(), request) as events:
            async for data in events:
                yield policy.decode(data, ChatCompletionChunk)
