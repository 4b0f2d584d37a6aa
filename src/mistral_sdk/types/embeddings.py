"""
Embedding request and response models.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from mistral_sdk.types.completions import Usage


class EncodingFormat(str, Enum):
    """Wire encoding of returned vectors."""

    FLOAT = "float"


class EmbeddingRequest(BaseModel):
    """Body of an embeddings call."""

    model: str
    input: list[str]
    encoding_format: EncodingFormat | None = None

    @property
    def batch_size(self) -> int:
        """Get the number of inputs."""
        return len(self.input)


class EmbeddingData(BaseModel):
    """A single embedding result."""

    object: str | None = None
    embedding: list[float]
    index: int

    @property
    def dimensions(self) -> int:
        """Get the dimensionality of the embedding."""
        return len(self.embedding)


class EmbeddingResponse(BaseModel):
    """Response of an embeddings call."""

    id: str | None = None
    object: str | None = None
    data: list[EmbeddingData] = Field(default_factory=list)
    model: str | None = None
    usage: Usage | None = None

    @property
    def vectors(self) -> list[list[float]]:
        """All vectors in input order."""
        return [d.embedding for d in sorted(self.data, key=lambda d: d.index)]
