"""
Client configuration.

Holds the URL layout, API version, timeouts and pool settings. Values
can be read from the environment with ``ClientConfig.from_env``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

import httpx

from mistral_sdk.errors import ConfigurationError
from mistral_sdk.transport.pool import PoolConfig

DEFAULT_BASE_URL = "https://api.mistral.ai"
DEFAULT_API_VERSION = "v1"

# Default timeouts
_DEFAULT_TIMEOUT = 30.0
_DEFAULT_CONNECT_TIMEOUT = 10.0

BASE_URL_ENV = "MISTRAL_BASE_URL"
API_VERSION_ENV = "MISTRAL_API_VERSION"
TIMEOUT_ENV = "MISTRAL_HTTP_TIMEOUT_SECS"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration shared by every endpoint of a client.

    Attributes:
        api_url_format: URL template with ``{version}`` and ``{endpoint}``
        api_version: Version segment of every URL
        timeout: Per-request timeout in seconds
        connect_timeout: Connection timeout in seconds
        pool: Connection pool settings for an owned transport
    """

    api_url_format: str = DEFAULT_BASE_URL + "/{version}/{endpoint}"
    api_version: str = DEFAULT_API_VERSION
    timeout: float = _DEFAULT_TIMEOUT
    connect_timeout: float = _DEFAULT_CONNECT_TIMEOUT
    pool: PoolConfig = field(default_factory=PoolConfig.default)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a configuration from environment variables.

        Reads MISTRAL_BASE_URL, MISTRAL_API_VERSION and
        MISTRAL_HTTP_TIMEOUT_SECS; unset variables keep their defaults.

        Raises:
            ConfigurationError: If a variable holds an unusable value
        """
        env = os.environ if environ is None else environ
        config = cls()

        base_url = env.get(BASE_URL_ENV)
        if base_url:
            config = config.with_base_url(base_url)

        version = env.get(API_VERSION_ENV)
        if version:
            config = replace(config, api_version=version.strip("/"))

        timeout = env.get(TIMEOUT_ENV)
        if timeout:
            try:
                value = float(timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid timeout {timeout!r}", setting=TIMEOUT_ENV
                ) from e
            if value <= 0:
                raise ConfigurationError(
                    f"Timeout must be positive, got {value}", setting=TIMEOUT_ENV
                )
            config = replace(config, timeout=value)

        return config

    def with_base_url(self, base_url: str) -> ClientConfig:
        """Return a copy pointing at another host."""
        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Base URL must be http(s), got {base_url!r}", setting=BASE_URL_ENV
            )
        return replace(self, api_url_format=base_url.rstrip("/") + "/{version}/{endpoint}")

    def build_url(self, endpoint: str) -> str:
        """Build the full URL of an endpoint path.

        Example:
            >>> ClientConfig().build_url("chat/completions")
            'https://api.mistral.ai/v1/chat/completions'
        """
        return self.api_url_format.format(
            version=self.api_version,
            endpoint=endpoint.lstrip("/"),
        )

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Convert to httpx Timeout."""
        return httpx.Timeout(self.timeout, connect=self.connect_timeout)
