"""
Error classification for Mistral API responses.

Maps HTTP status codes and error bodies onto a small set of standard
error classes so callers can decide whether to retry, abort or alert.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorClass(str, Enum):
    """Standard error classification."""

    INVALID_REQUEST = "invalid_request"
    """Malformed request body, invalid parameters, or unsupported operation."""

    AUTHENTICATION = "authentication"
    """Missing/invalid credentials (API key)."""

    PERMISSION_DENIED = "permission_denied"
    """Caller is authenticated but not permitted to access the resource."""

    NOT_FOUND = "not_found"
    """Requested resource (usually a model) not found."""

    RATE_LIMITED = "rate_limited"
    """Throttled due to request/token limits."""

    REQUEST_TOO_LARGE = "request_too_large"
    """Payload too large (e.g., context too long)."""

    TIMEOUT = "timeout"
    """Request timed out upstream."""

    CONFLICT = "conflict"
    """Request conflict."""

    SERVER_ERROR = "server_error"
    """Transient server-side failure (5xx)."""

    OVERLOADED = "overloaded"
    """Service overloaded / temporarily unavailable."""

    OTHER = "other"
    """Unknown classification."""


_RETRYABLE_CLASSES: frozenset[ErrorClass] = frozenset(
    {
        ErrorClass.RATE_LIMITED,
        ErrorClass.TIMEOUT,
        ErrorClass.CONFLICT,
        ErrorClass.SERVER_ERROR,
        ErrorClass.OVERLOADED,
    }
)

_DEFAULT_STATUS_MAPPING: dict[int, ErrorClass] = {
    400: ErrorClass.INVALID_REQUEST,
    401: ErrorClass.AUTHENTICATION,
    403: ErrorClass.PERMISSION_DENIED,
    404: ErrorClass.NOT_FOUND,
    408: ErrorClass.TIMEOUT,
    409: ErrorClass.CONFLICT,
    413: ErrorClass.REQUEST_TOO_LARGE,
    422: ErrorClass.INVALID_REQUEST,
    429: ErrorClass.RATE_LIMITED,
    500: ErrorClass.SERVER_ERROR,
    502: ErrorClass.SERVER_ERROR,
    503: ErrorClass.OVERLOADED,
    504: ErrorClass.TIMEOUT,
}


def classify_http_error(
    status_code: int,
    body: dict[str, Any] | None = None,
) -> ErrorClass:
    """Classify an HTTP error into a standard error class.

    Args:
        status_code: HTTP status code
        body: Response body (parsed JSON)

    Returns:
        ErrorClass representing the error type
    """
    # Context-length overflows come back as plain 400s
    if status_code == 400 and body:
        message = (extract_error_message(body) or "").lower()
        if "too large" in message or "context length" in message:
            return ErrorClass.REQUEST_TOO_LARGE

    if status_code in _DEFAULT_STATUS_MAPPING:
        return _DEFAULT_STATUS_MAPPING[status_code]

    if 400 <= status_code < 500:
        return ErrorClass.INVALID_REQUEST
    if 500 <= status_code < 600:
        return ErrorClass.SERVER_ERROR

    return ErrorClass.OTHER


def is_retryable(error_class: ErrorClass) -> bool:
    """Check if an error class is conventionally retryable.

    The SDK never retries on its own; this only informs the caller.
    """
    return error_class in _RETRYABLE_CLASSES


def extract_error_message(body: dict[str, Any] | None) -> str | None:
    """Extract error message from response body.

    Supports the error envelopes the API is known to return:
    - Simple: {"message": "..."}
    - Nested: {"error": {"message": "..."}} or {"error": "..."}
    - Validation: {"detail": "..."} or {"detail": [{"msg": "..."}]}

    Args:
        body: Response body (parsed JSON)

    Returns:
        Error message if found, None otherwise
    """
    if not body:
        return None

    if "message" in body:
        msg = body["message"]
        if isinstance(msg, str):
            return msg
        # Validation failures nest the detail list under "message"
        if isinstance(msg, dict) and isinstance(msg.get("detail"), list):
            return _first_detail(msg["detail"])

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            msg = error.get("message")
            if isinstance(msg, str):
                return msg
        elif isinstance(error, str):
            return error

    if "detail" in body:
        detail = body["detail"]
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list) and detail:
            return _first_detail(detail)

    return None


def _first_detail(detail: list[Any]) -> str | None:
    if not detail:
        return None
    first = detail[0]
    if isinstance(first, dict) and isinstance(first.get("msg"), str):
        return first["msg"]
    return str(first)
