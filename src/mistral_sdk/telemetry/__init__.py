"""
Telemetry for mistral-sdk: structured, credential-masking logging.
"""

from mistral_sdk.telemetry.logger import (
    JsonFormatter,
    LogLevel,
    MistralLogger,
    SensitiveDataMasker,
    TextFormatter,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "LogLevel",
    "MistralLogger",
    "SensitiveDataMasker",
    "TextFormatter",
    "get_logger",
]
