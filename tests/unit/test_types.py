"""Tests for request/response types."""

from mistral_sdk.types import (
    ChatCompletionResponse,
    ChatMessage,
    ChatRole,
    EmbeddingRequest,
    EmbeddingResponse,
    Function,
    ModelList,
    Tool,
)


class TestChatMessage:
    """Tests for ChatMessage."""

    def test_constructors(self) -> None:
        """Test role helpers."""
        assert ChatMessage.system("s").role == ChatRole.SYSTEM
        assert ChatMessage.user("u").role == ChatRole.USER
        assert ChatMessage.assistant("a").content == "a"

    def test_role_from_wire(self) -> None:
        """Test roles parse from their wire names."""
        message = ChatMessage.model_validate({"role": "tool", "content": "42", "tool_call_id": "c1"})
        assert message.role == ChatRole.TOOL
        assert message.tool_call_id == "c1"


class TestTool:
    """Tests for tool definitions."""

    def test_function_defaults(self) -> None:
        """Test a tool defaults to the function type."""
        tool = Tool(function=Function(name="get_weather", parameters={"type": "object"}))
        assert tool.type == "function"
        assert tool.function.description is None


class TestChatCompletionResponse:
    """Tests for ChatCompletionResponse."""

    def test_content_shortcut(self) -> None:
        """Test content of the first choice."""
        response = ChatCompletionResponse.model_validate(
            {"id": "x", "choices": [{"index": 0, "message": {"role": "assistant", "content": "hi"}}]}
        )
        assert response.content == "hi"

    def test_no_choices(self) -> None:
        """Test content is None without choices."""
        assert ChatCompletionResponse(id="x").content is None


class TestModelList:
    """Tests for ModelList."""

    def test_ids(self) -> None:
        """Test model identifiers."""
        models = ModelList.model_validate({"data": [{"id": "a"}, {"id": "b"}]})
        assert models.ids == ["a", "b"]
        assert models.data[0].permission == []


class TestEmbeddings:
    """Tests for embedding types."""

    def test_batch_size(self) -> None:
        """Test the number of inputs."""
        assert EmbeddingRequest(model="mistral-embed", input=["a", "b", "c"]).batch_size == 3

    def test_vectors_sorted_by_index(self) -> None:
        """Test vectors follow input order."""
        response = EmbeddingResponse.model_validate(
            {"data": [{"embedding": [2.0], "index": 1}, {"embedding": [1.0], "index": 0}]}
        )
        assert response.vectors == [[1.0], [2.0]]
