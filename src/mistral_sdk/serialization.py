"""
JSON serialization policy shared by all endpoints.

Rules:
- Fields left as None are omitted from request bodies, never sent as null
- Enum fields are str enums and go over the wire as their names
- Unknown response fields are ignored
- Bodies that are not JSON, or do not fit the response model, raise
  SerializationError rather than ApiError
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from mistral_sdk.errors import SerializationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class SerializationPolicy:
    """Immutable JSON codec configuration.

    Attributes:
        exclude_none: Drop None-valued fields when encoding
        by_alias: Use field aliases as wire names
    """

    exclude_none: bool = True
    by_alias: bool = True

    def encode(self, model: BaseModel) -> dict[str, Any]:
        """Encode a request model to a JSON-compatible dict.

        Raises:
            SerializationError: If the model cannot be encoded, including
                models whose object graph contains a cycle
        """
        try:
            return model.model_dump(
                mode="json",
                exclude_none=self.exclude_none,
                by_alias=self.by_alias,
            )
        except (ValueError, TypeError) as e:
            raise SerializationError(
                f"Cannot encode {type(model).__name__}: {e}",
                model=type(model).__name__,
            ) from e

    def encode_json(self, model: BaseModel) -> bytes:
        """Encode a request model to JSON bytes."""
        return json.dumps(self.encode(model), separators=(",", ":")).encode("utf-8")

    def decode(self, content: bytes | str, model_type: type[ModelT]) -> ModelT:
        """Decode a JSON body into a response model.

        Raises:
            SerializationError: If the body is not JSON or does not match
        """
        try:
            return model_type.model_validate_json(content)
        except ValidationError as e:
            text = content.decode("utf-8", "replace") if isinstance(content, bytes) else content
            raise SerializationError(
                f"Cannot decode {model_type.__name__}: {e.error_count()} error(s), "
                f"first: {e.errors()[0]['msg']}",
                model=model_type.__name__,
                body=text,
            ) from e


DEFAULT_POLICY = SerializationPolicy()
