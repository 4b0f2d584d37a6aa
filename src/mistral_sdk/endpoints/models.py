"""
Model listing endpoint.
"""

from __future__ import annotations

from urllib.parse import quote

from mistral_sdk.endpoints.base import BaseEndpoint
from mistral_sdk.types.models import ModelCard, ModelList


class ModelsEndpoint(BaseEndpoint):
    """Lists the models available to the account."""

    endpoint = "models"

    async def list_models(self) -> ModelList:
        """List all available models."""
        return await self._context.send("GET", self._path(), ModelList)

    async def get_model(self, model_id: str) -> ModelCard:
        """Fetch a single model by identifier.

        Raises:
            ValueError: If ``model_id`` is empty
            ApiError: With status 404 if the model does not exist
        """
        if not model_id:
            raise ValueError("model_id must not be empty")
        return await self._context.send("GET", self._path(quote(model_id, safe="")), ModelCard)
