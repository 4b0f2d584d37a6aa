"""
Embedding endpoint.
"""

from __future__ import annotations

from mistral_sdk.endpoints.base import BaseEndpoint
from mistral_sdk.types.embeddings import EmbeddingRequest, EmbeddingResponse


class EmbeddingsEndpoint(BaseEndpoint):
    """Gets model embeddings.

    Example:
        >>> request = EmbeddingRequest(model="mistral-embed", input=["Hello", "World"])
        >>> response = await client.embeddings.get_embeddings(request)
        >>> for item in response.data:
        ...     print(f"Text {item.index}: {item.dimensions} dimensions")
    """

    endpoint = "embeddings"

    async def get_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        """Embed a batch of texts in one call."""
        return await self._context.send(
            "POST", self._path(), EmbeddingResponse, body=request
        )
