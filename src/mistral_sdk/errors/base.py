"""
Base error classes for mistral-sdk.

Provides a layered error hierarchy:
- MistralError: Base class for all library errors
- ConfigurationError: No usable credential or invalid settings
- TransportError: HTTP/network errors
- ApiError: Non-success responses from the remote API
- SerializationError: Request/response bodies that cannot be encoded or decoded
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mistral_sdk.errors.classification import (
    ErrorClass,
    classify_http_error,
    extract_error_message,
    is_retryable,
)


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'config', 'transport', 'api')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class MistralError(Exception):
    """Base class for all mistral-sdk errors.

    All errors from this library inherit from this class, making it easy
    to catch all library errors with a single except clause.

    Attributes:
        message: Human-readable error message
        context: Structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> MistralError:
        """Add a hint to this error."""
        self.context.hint = hint
        # Exception args are fixed at construction; refresh them
        self.args = (self._format_message(),)
        return self


class ConfigurationError(MistralError):
    """No usable configuration was found.

    Raised at client construction when:
    - No API key was passed and none is set in the environment
    - A configuration value from the environment cannot be parsed
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        setting: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="config")
        if setting:
            ctx.details["setting"] = setting
        super().__init__(message, ctx)
        self.setting = setting


class TransportError(MistralError):
    """Error during HTTP transport.

    Raised when:
    - DNS resolution or connection failure
    - Timeout
    - Any other network-level httpx error
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.url = url
        self.__cause__ = cause


class SerializationError(MistralError):
    """A body could not be mapped to or from its typed model.

    Raised when the HTTP status was a success but the body is not JSON or
    does not match the expected response shape, and when a request model
    cannot be encoded.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        model: str | None = None,
        body: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="serialization")
        if model:
            ctx.details["model"] = model
        if body is not None:
            ctx.details["body"] = body[:200]
        super().__init__(message, ctx)
        self.model = model
        self.body = body


class ApiError(MistralError):
    """Error returned by the Mistral API.

    Attributes:
        status_code: HTTP status code
        error_class: Standardized error classification
        retryable: Whether the error is conventionally retryable by the caller
        raw_error: Raw error payload returned by the API
        request_id: Request identifier, when the API reported one
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_class: ErrorClass = ErrorClass.OTHER,
        raw_error: dict[str, Any] | None = None,
        request_id: str | None = None,
    ) -> None:
        ctx = ErrorContext(source="api")
        ctx.details["status_code"] = status_code
        ctx.details["error_class"] = error_class.value
        if request_id:
            ctx.details["request_id"] = request_id

        super().__init__(message, ctx)

        self.status_code = status_code
        self.error_class = error_class
        self.raw_error = raw_error or {}
        self.request_id = request_id

    @property
    def retryable(self) -> bool:
        """Whether a caller may reasonably retry this request."""
        return is_retryable(self.error_class)

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: Any = None,
        headers: dict[str, str] | None = None,
        text: str | None = None,
    ) -> ApiError:
        """Create ApiError from an HTTP response.

        Args:
            status_code: HTTP status code
            body: Response body (parsed JSON), if it was JSON
            headers: Response headers
            text: Raw response text, used when the body was not JSON

        Returns:
            ApiError with appropriate classification
        """
        payload = _error_envelope(body)
        error_class = classify_http_error(status_code, payload)
        message = extract_error_message(payload) or (text or "").strip() or f"HTTP {status_code}"

        request_id = None
        if headers:
            lowered = {k.lower(): v for k, v in headers.items()}
            request_id = lowered.get("x-request-id") or lowered.get("request-id")
        if payload and isinstance(payload.get("request_id"), str):
            request_id = payload["request_id"]

        raw_error = body if isinstance(body, dict) else None
        if raw_error is None and body is not None:
            raw_error = {"body": body}
        elif raw_error is None and text:
            raw_error = {"text": text}

        return cls(
            message=message,
            status_code=status_code,
            error_class=error_class,
            raw_error=raw_error,
            request_id=request_id,
        )


def _error_envelope(body: Any) -> dict[str, Any] | None:
    # Bare JSON strings and lists are wrapped so the usual lookups apply
    if isinstance(body, dict):
        return body
    if isinstance(body, str) and body.strip():
        return {"message": body}
    if isinstance(body, list):
        return {"detail": body}
    return None
