"""
Request context shared by the endpoint wrappers.

The context carries everything one API call needs (credential,
transport, serialization policy and URL layout) so endpoints never
hold a reference back to the client that owns them.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from time import monotonic
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel

from mistral_sdk.errors import ApiError, MistralError, TransportError
from mistral_sdk.serialization import DEFAULT_POLICY, SerializationPolicy
from mistral_sdk.telemetry import get_logger
from mistral_sdk.transport.auth import get_auth_header
from mistral_sdk.transport.http import default_headers

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from mistral_sdk.config import ClientConfig
    from mistral_sdk.transport.auth import APIAuthentication
    from mistral_sdk.transport.http import TransportHandle

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_SSE_DONE = "[DONE]"


class RequestContext:
    """Performs single request/response round trips for the endpoints.

    Everything here is read-only after construction apart from the
    closed flag, so one context serves any number of concurrent calls.
    """

    def __init__(
        self,
        auth: APIAuthentication,
        transport: TransportHandle,
        config: ClientConfig,
        policy: SerializationPolicy = DEFAULT_POLICY,
    ) -> None:
        self.auth = auth
        self.transport = transport
        self.config = config
        self.policy = policy
        self._closed = False

    @property
    def http(self) -> httpx.AsyncClient:
        """The shared httpx client."""
        return self.transport.client

    @property
    def closed(self) -> bool:
        return self._closed

    def mark_closed(self) -> None:
        self._closed = True

    def _build_headers(self, has_body: bool, accept: str | None = None) -> dict[str, str]:
        headers = default_headers()
        headers.update(get_auth_header(self.auth))
        if has_body:
            headers["Content-Type"] = "application/json"
        if accept:
            headers["Accept"] = accept
        return headers

    def _ensure_open(self) -> None:
        if self._closed or self.http.is_closed:
            raise MistralError("Client is closed").with_hint("create a new MistralClient")

    async def send(
        self,
        method: str,
        endpoint: str,
        response_type: type[ModelT],
        *,
        body: BaseModel | None = None,
    ) -> ModelT:
        """Issue one API call and decode its response.

        Args:
            method: HTTP method
            endpoint: Endpoint path below the version segment
            response_type: Model to decode a successful body into
            body: Request model, encoded with the shared policy

        Returns:
            Decoded response model

        Raises:
            TransportError: On network/connection errors
            ApiError: On non-success status codes
            SerializationError: If the body cannot be encoded or decoded
        """
        self._ensure_open()
        url = self.config.build_url(endpoint)
        content = self.policy.encode_json(body) if body is not None else None
        headers = self._build_headers(content is not None)

        start = monotonic()
        try:
            response = await self.http.request(method, url, content=content, headers=headers)
        except httpx.HTTPError as e:
            raise _transport_error(e, url) from e

        elapsed_ms = 1000 * (monotonic() - start)
        logger.debug(
            "Mistral API call",
            method=method,
            url=url,
            status=response.status_code,
            latency_ms=round(elapsed_ms, 1),
        )

        if not response.is_success:
            raise _api_error(response, url)

        return self.policy.decode(response.content, response_type)

    @asynccontextmanager
    async def stream(
        self,
        endpoint: str,
        body: BaseModel,
    ) -> AsyncIterator[AsyncIterator[str]]:
        """Open a server-sent event stream.

        Yields an iterator over the ``data:`` payloads of the stream,
        ending before the ``[DONE]`` sentinel.

        Example:
            >>> async with context.stream("chat/completions", request) as events:
            ...     async for data in events:
            ...         process(data)
        """
        self._ensure_open()
        url = self.config.build_url(endpoint)
        content = self.policy.encode_json(body)
        headers = self._build_headers(True, accept="text/event-stream")

        try:
            async with self.http.stream("POST", url, content=content, headers=headers) as response:
                if not response.is_success:
                    await response.aread()
                    raise _api_error(response, url)
                yield _iter_sse_data(response)
        except httpx.HTTPError as e:
            raise _transport_error(e, url) from e


async def _iter_sse_data(response: httpx.Response) -> AsyncIterator[str]:
    async for line in response.aiter_lines():
        if not line.startswith("data:"):
            continue
        data = line[len("data:"):].strip()
        if data == _SSE_DONE:
            return
        if data:
            yield data


def _transport_error(error: httpx.HTTPError, url: str) -> TransportError:
    if isinstance(error, httpx.ConnectError):
        message = f"Connection failed: {error}"
    elif isinstance(error, httpx.TimeoutException):
        message = f"Request timed out: {error}"
    else:
        message = f"HTTP error: {error}"
    logger.warning("Mistral transport failure", url=url, error=type(error).__name__)
    return TransportError(message, url=url, cause=error)


def _api_error(response: httpx.Response, url: str) -> ApiError:
    body: Any = None
    try:
        body = response.json()
    except ValueError:
        body = None

    error = ApiError.from_response(
        status_code=response.status_code,
        body=body,
        headers=dict(response.headers),
        text=None if isinstance(body, dict) else response.text,
    )
    logger.warning(
        "Mistral API error",
        url=url,
        status=error.status_code,
        error_class=error.error_class.value,
    )
    return error
