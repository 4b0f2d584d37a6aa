"""
Transport layer - HTTP plumbing shared by every endpoint.

Provides:
- API key resolution and bearer headers
- Owned/borrowed httpx client handles
- Connection pooling with a bounded connection lifetime
"""

from mistral_sdk.transport.auth import (
    API_KEY_ENV,
    APIAuthentication,
    get_auth_header,
    resolve_authentication,
)
from mistral_sdk.transport.http import (
    BorrowedTransport,
    OwnedTransport,
    TransportHandle,
    acquire_transport,
    create_http_client,
    release_transport,
)
from mistral_sdk.transport.pool import (
    DEFAULT_CONNECTION_LIFETIME,
    LifetimeLimitedTransport,
    PoolConfig,
)

__all__ = [
    "API_KEY_ENV",
    "APIAuthentication",
    "BorrowedTransport",
    "DEFAULT_CONNECTION_LIFETIME",
    "LifetimeLimitedTransport",
    "OwnedTransport",
    "PoolConfig",
    "TransportHandle",
    "acquire_transport",
    "create_http_client",
    "get_auth_header",
    "release_transport",
    "resolve_authentication",
]
