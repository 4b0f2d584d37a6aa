"""
Connection pooling for the HTTP transport.

httpx only expires idle connections. The API sits behind rotating
endpoints, so the owned transport also caps how long a pool of
connections is reused before everything is re-established.
"""

from __future__ import annotations

import importlib.util
import time
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass

import httpx

from mistral_sdk.telemetry import get_logger

logger = get_logger(__name__)

# Connections are recycled after 15 minutes
DEFAULT_CONNECTION_LIFETIME = 15 * 60.0


def _http2_enabled() -> bool:
    """Enable HTTP/2 only when optional dependency is present."""
    return importlib.util.find_spec("h2") is not None


@dataclass(frozen=True)
class PoolConfig:
    """Configuration for the owned connection pool.

    Attributes:
        max_connections: Maximum total connections
        max_keepalive_connections: Maximum idle connections to keep
        keepalive_expiry: Seconds before an idle connection expires
        connection_lifetime: Seconds a pool is reused before reconnecting
            (None disables rotation)
    """

    max_connections: int = 100
    max_keepalive_connections: int = 20
    keepalive_expiry: float = 30.0
    connection_lifetime: float | None = DEFAULT_CONNECTION_LIFETIME

    @classmethod
    def default(cls) -> PoolConfig:
        """Create default configuration."""
        return cls()

    def to_httpx_limits(self) -> httpx.Limits:
        """Convert to httpx Limits."""
        return httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive_connections,
            keepalive_expiry=self.keepalive_expiry,
        )

    def create_inner_transport(self) -> httpx.AsyncBaseTransport:
        """Create a fresh httpx connection pool."""
        return httpx.AsyncHTTPTransport(
            limits=self.to_httpx_limits(),
            http2=_http2_enabled(),
        )


class _Generation:
    """One inner connection pool and the responses still reading from it."""

    __slots__ = ("created_at", "in_flight", "retired", "transport")

    def __init__(self, transport: httpx.AsyncBaseTransport, created_at: float) -> None:
        self.transport = transport
        self.created_at = created_at
        self.in_flight = 0
        self.retired = False


class _TrackedStream(httpx.AsyncByteStream):
    """Response stream that tells its pool when the body is released."""

    def __init__(
        self,
        stream: httpx.AsyncByteStream,
        owner: LifetimeLimitedTransport,
        generation: _Generation,
    ) -> None:
        self._stream = stream
        self._owner = owner
        self._generation = generation
        self._released = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        async for chunk in self._stream:
            yield chunk

    async def aclose(self) -> None:
        if self._released:
            return
        self._released = True
        try:
            await self._stream.aclose()
        finally:
            await self._owner._release(self._generation)


class LifetimeLimitedTransport(httpx.AsyncBaseTransport):
    """Async transport whose connections live for a bounded time.

    Requests go to the current inner pool. Once that pool is older than
    ``lifetime`` seconds, the next request starts a new pool; the old one
    is closed as soon as its last in-flight response is closed.

    All bookkeeping happens without awaiting between check and update,
    so concurrent tasks on one event loop need no lock.

    Example:
        >>> transport = LifetimeLimitedTransport(lifetime=900.0)
        >>> client = httpx.AsyncClient(transport=transport)
    """

    def __init__(
        self,
        lifetime: float | None = DEFAULT_CONNECTION_LIFETIME,
        factory: Callable[[], httpx.AsyncBaseTransport] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the transport.

        Args:
            lifetime: Seconds before the pool is replaced (None: never)
            factory: Creates inner transports; defaults to PoolConfig's
            clock: Monotonic clock, injectable for tests
        """
        self._lifetime = lifetime
        self._factory = factory or PoolConfig.default().create_inner_transport
        self._clock = clock
        self._current = self._new_generation()
        self._retired: list[_Generation] = []

    def _new_generation(self) -> _Generation:
        return _Generation(self._factory(), self._clock())

    @property
    def retired_count(self) -> int:
        """Number of retired pools still waiting for responses to close."""
        return len(self._retired)

    async def _acquire(self) -> _Generation:
        current = self._current
        if self._lifetime is not None and self._clock() - current.created_at >= self._lifetime:
            logger.debug("Recycling connection pool", lifetime_s=self._lifetime)
            self._current = self._new_generation()
            current.retired = True
            if current.in_flight:
                self._retired.append(current)
            else:
                await current.transport.aclose()
        self._current.in_flight += 1
        return self._current

    async def _release(self, generation: _Generation) -> None:
        generation.in_flight -= 1
        if generation.retired and generation.in_flight == 0 and generation in self._retired:
            self._retired.remove(generation)
            await generation.transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        generation = await self._acquire()
        try:
            response = await generation.transport.handle_async_request(request)
        except BaseException:
            await self._release(generation)
            raise

        if not isinstance(response.stream, httpx.AsyncByteStream):
            await self._release(generation)
            raise TypeError("Inner transport returned a non-async response stream")
        return httpx.Response(
            status_code=response.status_code,
            headers=response.headers,
            stream=_TrackedStream(response.stream, self, generation),
            extensions=response.extensions,
        )

    async def aclose(self) -> None:
        retired, self._retired = self._retired, []
        for generation in retired:
            await generation.transport.aclose()
        await self._current.transport.aclose()
