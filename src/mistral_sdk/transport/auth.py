"""
API key resolution utilities.

Resolves the Mistral API key from, in order:
1. Explicit value
2. The MISTRAL_API_KEY environment variable
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from mistral_sdk.errors import ConfigurationError

API_KEY_ENV = "MISTRAL_API_KEY"


@dataclass(frozen=True)
class APIAuthentication:
    """Immutable credential used to authenticate API calls.

    The key never appears in the repr, so credentials can be logged safely.
    """

    api_key: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("API key must be a non-empty string", setting="api_key")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> APIAuthentication | None:
        """Load the credential from the environment.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            APIAuthentication, or None if the variable is unset or empty
        """
        env = os.environ if environ is None else environ
        key = env.get(API_KEY_ENV)
        if key:
            return cls(key)
        return None


def resolve_authentication(
    explicit: APIAuthentication | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> APIAuthentication:
    """Resolve the credential for a client.

    Resolution order:
    1. Explicit credential or key string if provided
    2. MISTRAL_API_KEY from ``environ``

    Args:
        explicit: Explicitly provided credential
        environ: Environment mapping; defaults to os.environ. Pass a plain
            dict to resolve against a fake environment.

    Returns:
        Resolved APIAuthentication

    Raises:
        ConfigurationError: If no usable credential is available
    """
    if isinstance(explicit, APIAuthentication):
        return explicit
    if explicit:
        return APIAuthentication(explicit)

    auth = APIAuthentication.from_env(environ)
    if auth is not None:
        return auth

    raise ConfigurationError(
        "No Mistral API key found",
        setting=API_KEY_ENV,
    ).with_hint(f"pass api_key=... or set {API_KEY_ENV}")


def get_auth_header(auth: APIAuthentication) -> dict[str, str]:
    """Get the bearer authentication header for a credential."""
    return {"Authorization": f"Bearer {auth.api_key}"}
