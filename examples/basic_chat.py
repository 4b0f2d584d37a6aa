#!/usr/bin/env python3
"""
Basic chat completion example.

Lists the available models, asks one question, streams a second
answer and embeds two sentences, all over one client.

Usage:
    export MISTRAL_API_KEY="your-api-key"
    python examples/basic_chat.py
"""

import asyncio

from mistral_sdk import (
    ApiError,
    ChatCompletionRequest,
    ChatMessage,
    EmbeddingRequest,
    MistralClient,
)


async def main() -> None:
    """Run basic chat example."""
    async with MistralClient() as client:
        models = await client.models.list_models()
        print(f"Models: {', '.join(models.ids)}")
        print()

        request = ChatCompletionRequest(
            model="mistral-small-latest",
            messages=[
                ChatMessage.system("You are a helpful assistant."),
                ChatMessage.user("What is the capital of France?"),
            ],
            temperature=0.7,
        )
        response = await client.completions.get_completion(request)
        print(f"Response: {response.content}")
        if response.usage:
            print(f"Tokens: {response.usage.prompt_tokens} in, {response.usage.completion_tokens} out")
        print()

        # Streaming
        request = ChatCompletionRequest(
            model="mistral-small-latest",
            messages=[ChatMessage.user("Write a haiku about Python.")],
        )
        async for chunk in client.completions.stream_completion(request):
            if chunk.choices:
                print(chunk.choices[0].delta.content or "", end="", flush=True)
        print()
        print()

        embeddings = await client.embeddings.get_embeddings(
            EmbeddingRequest(model="mistral-embed", input=["Hello", "World"])
        )
        for item in embeddings.data:
            print(f"Text {item.index}: {item.dimensions} dimensions")

        try:
            await client.models.get_model("does-not-exist")
        except ApiError as e:
            print(f"Expected failure: {e.status_code} {e.message}")


if __name__ == "__main__":
    asyncio.run(main())
