"""mistral-sdk-python: async client for the Mistral API.

Typed access to the chat completion, model listing and embedding
endpoints over a single pooled HTTP transport.
"""
from __future__ import annotations

from mistral_sdk.client import MistralClient
from mistral_sdk.config import ClientConfig
from mistral_sdk.errors import (
    ApiError,
    ConfigurationError,
    ErrorClass,
    MistralError,
    SerializationError,
    TransportError,
)
from mistral_sdk.serialization import DEFAULT_POLICY, SerializationPolicy
from mistral_sdk.transport import APIAuthentication, PoolConfig
from mistral_sdk.types import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ChatRole,
    EmbeddingRequest,
    EmbeddingResponse,
    ModelCard,
    ModelList,
    ResponseFormat,
    ResponseFormatType,
    Tool,
    ToolChoice,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "APIAuthentication",
    "ClientConfig",
    "MistralClient",
    "PoolConfig",
    # Serialization
    "DEFAULT_POLICY",
    "SerializationPolicy",
    # Errors
    "ApiError",
    "ConfigurationError",
    "ErrorClass",
    "MistralError",
    "SerializationError",
    "TransportError",
    # Types
    "ChatCompletionChunk",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "ChatRole",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "ModelCard",
    "ModelList",
    "ResponseFormat",
    "ResponseFormatType",
    "Tool",
    "ToolChoice",
    # Version
    "__version__",
]
