"""
Request and response models for the Mistral API.
"""

from mistral_sdk.types.completions import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ChatRole,
    Choice,
    ChunkChoice,
    DeltaMessage,
    Function,
    FunctionCall,
    ResponseFormat,
    ResponseFormatType,
    Tool,
    ToolCall,
    ToolChoice,
    Usage,
)
from mistral_sdk.types.embeddings import (
    EmbeddingData,
    EmbeddingRequest,
    EmbeddingResponse,
    EncodingFormat,
)
from mistral_sdk.types.models import ModelCard, ModelList, ModelPermission

__all__ = [
    # Completions
    "ChatCompletionChunk",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "ChatRole",
    "Choice",
    "ChunkChoice",
    "DeltaMessage",
    "Function",
    "FunctionCall",
    "ResponseFormat",
    "ResponseFormatType",
    "Tool",
    "ToolCall",
    "ToolChoice",
    "Usage",
    # Embeddings
    "EmbeddingData",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EncodingFormat",
    # Models
    "ModelCard",
    "ModelList",
    "ModelPermission",
]
