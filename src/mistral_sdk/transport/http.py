"""
HTTP transport ownership.

A client either creates its ``httpx.AsyncClient`` (owned) or is handed
one by the caller (borrowed). The variant is fixed at construction and
decides whether closing the client closes the transport.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Union

import httpx

from mistral_sdk.transport.pool import LifetimeLimitedTransport

if TYPE_CHECKING:
    from mistral_sdk.config import ClientConfig


_UA_VERSION: str | None = None


def _get_ua_version() -> str:
    """Get package version for User-Agent (cached)."""
    global _UA_VERSION
    if _UA_VERSION is None:
        try:
            _UA_VERSION = version("mistral-sdk-python")
        except PackageNotFoundError:
            _UA_VERSION = "0.1.0"
    return _UA_VERSION


def default_headers() -> dict[str, str]:
    """Headers sent with every request (authentication excluded)."""
    return {
        "Accept": "application/json",
        "User-Agent": f"mistral-sdk-python/{_get_ua_version()}",
    }


@dataclass(frozen=True)
class OwnedTransport:
    """An httpx client created by, and closed with, the Mistral client."""

    client: httpx.AsyncClient


@dataclass(frozen=True)
class BorrowedTransport:
    """An httpx client supplied by the caller; never closed by the SDK."""

    client: httpx.AsyncClient


TransportHandle = Union[OwnedTransport, BorrowedTransport]


def create_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Create the pooled httpx client used when the caller supplies none.

    Connections are reused for at most ``config.pool.connection_lifetime``
    seconds before the pool reconnects.
    """
    transport = LifetimeLimitedTransport(
        lifetime=config.pool.connection_lifetime,
        factory=config.pool.create_inner_transport,
    )
    return httpx.AsyncClient(
        transport=transport,
        timeout=config.to_httpx_timeout(),
    )


def acquire_transport(
    client: httpx.AsyncClient | None,
    config: ClientConfig,
) -> TransportHandle:
    """Wrap a caller-supplied client, or create an owned one."""
    if client is not None:
        return BorrowedTransport(client)
    return OwnedTransport(create_http_client(config))


async def release_transport(handle: TransportHandle) -> bool:
    """Release a transport according to its ownership.

    Returns:
        True if the underlying client was closed
    """
    if isinstance(handle, OwnedTransport):
        if not handle.client.is_closed:
            await handle.client.aclose()
            return True
        return False
    if isinstance(handle, BorrowedTransport):
        return False
    raise TypeError(f"Unknown transport handle: {type(handle).__name__}")
