"""
Chat completion request and response models.

Field names follow the wire JSON of the chat/completions endpoint.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatRole(str, Enum):
    """Message role enumeration."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class ResponseFormatType(str, Enum):
    """Output format requested from the model."""

    TEXT = "text"
    JSON_OBJECT = "json_object"


class ToolChoice(str, Enum):
    """How the model may use the supplied tools."""

    AUTO = "auto"
    ANY = "any"
    NONE = "none"


class FunctionCall(BaseModel):
    """Function invocation emitted by the model."""

    name: str
    arguments: str = Field(description="JSON encoded arguments")


class ToolCall(BaseModel):
    """Tool call attached to an assistant message."""

    id: str | None = None
    type: str = "function"
    function: FunctionCall


class ChatMessage(BaseModel):
    """A single message in a conversation."""

    model_config = ConfigDict(populate_by_name=True)

    role: ChatRole
    content: str | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None
    tool_call_id: str | None = None

    @classmethod
    def system(cls, content: str) -> ChatMessage:
        """Create a system message."""
        return cls(role=ChatRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> ChatMessage:
        """Create a user message."""
        return cls(role=ChatRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> ChatMessage:
        """Create an assistant message."""
        return cls(role=ChatRole.ASSISTANT, content=content)


class ResponseFormat(BaseModel):
    """Response format constraint."""

    type: ResponseFormatType = ResponseFormatType.TEXT


class Function(BaseModel):
    """Function the model may call."""

    name: str
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict, description="JSON schema")


class Tool(BaseModel):
    """Tool definition sent with a request."""

    type: str = "function"
    function: Function


class ChatCompletionRequest(BaseModel):
    """Body of a chat/completions call.

    Only ``model`` and ``messages`` are required by the API; every other
    field is left out of the request unless set.
    """

    model_config = ConfigDict(populate_by_name=True)

    model: str
    messages: list[ChatMessage]
    temperature: float | None = None
    top_p: float | None = None
    max_tokens: int | None = None
    stream: bool | None = None
    safe_prompt: bool | None = None
    random_seed: int | None = None
    response_format: ResponseFormat | None = None
    tools: list[Tool] | None = None
    tool_choice: ToolChoice | None = None


class Usage(BaseModel):
    """Token usage for a completion."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Choice(BaseModel):
    """One generated alternative."""

    index: int
    message: ChatMessage
    finish_reason: str | None = None


class ChatCompletionResponse(BaseModel):
    """Response of a chat/completions call."""

    id: str
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage | None = None

    @property
    def content(self) -> str | None:
        """Text of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].message.content


class DeltaMessage(BaseModel):
    """Incremental message content in a streamed chunk."""

    role: ChatRole | None = None
    content: str | None = None
    tool_calls: list[ToolCall] | None = None


class ChunkChoice(BaseModel):
    """One alternative within a streamed chunk."""

    index: int
    delta: DeltaMessage
    finish_reason: str | None = None


class ChatCompletionChunk(BaseModel):
    """A single server-sent event of a streamed completion."""

    id: str
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[ChunkChoice] = Field(default_factory=list)
    usage: Usage | None = None
