"""
Endpoint wrappers, one per API surface.
"""

from mistral_sdk.endpoints.base import BaseEndpoint
from mistral_sdk.endpoints.completions import CompletionsEndpoint
from mistral_sdk.endpoints.embeddings import EmbeddingsEndpoint
from mistral_sdk.endpoints.models import ModelsEndpoint

__all__ = [
    "BaseEndpoint",
    "CompletionsEndpoint",
    "EmbeddingsEndpoint",
    "ModelsEndpoint",
]
