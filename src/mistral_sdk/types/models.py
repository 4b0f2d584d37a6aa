"""
Model listing types.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModelPermission(BaseModel):
    """Permission entry attached to a model card."""

    id: str | None = None
    object: str | None = None
    created: int | None = None
    allow_create_engine: bool | None = None
    allow_sampling: bool | None = None
    allow_logprobs: bool | None = None
    allow_search_indices: bool | None = None
    allow_view: bool | None = None
    allow_fine_tuning: bool | None = None
    organization: str | None = None
    group: str | None = None
    is_blocking: bool | None = None


class ModelCard(BaseModel):
    """A model available to the account."""

    id: str
    object: str | None = None
    created: int | None = None
    owned_by: str | None = None
    root: str | None = None
    parent: str | None = None
    permission: list[ModelPermission] = Field(default_factory=list)


class ModelList(BaseModel):
    """Response of the models endpoint."""

    object: str | None = None
    data: list[ModelCard] = Field(default_factory=list)

    @property
    def ids(self) -> list[str]:
        """Identifiers of all listed models."""
        return [m.id for m in self.data]
