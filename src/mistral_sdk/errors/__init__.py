"""Error hierarchy for mistral-sdk.

Every failure mode surfaces as its own error type so callers can tell a
missing credential from a network failure, an API rejection, or an
unusable response body.
"""

from mistral_sdk.errors.base import (
    ApiError,
    ConfigurationError,
    ErrorContext,
    MistralError,
    SerializationError,
    TransportError,
)
from mistral_sdk.errors.classification import (
    ErrorClass,
    classify_http_error,
    extract_error_message,
    is_retryable,
)

__all__ = [
    # Base errors
    "ApiError",
    "ConfigurationError",
    "ErrorContext",
    "MistralError",
    "SerializationError",
    "TransportError",
    # Classification
    "ErrorClass",
    "classify_http_error",
    "extract_error_message",
    "is_retryable",
]
