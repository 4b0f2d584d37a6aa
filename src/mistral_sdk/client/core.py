"""
Core MistralClient implementation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mistral_sdk.client.context import RequestContext
from mistral_sdk.config import ClientConfig
from mistral_sdk.endpoints import CompletionsEndpoint, EmbeddingsEndpoint, ModelsEndpoint
from mistral_sdk.serialization import DEFAULT_POLICY
from mistral_sdk.telemetry import get_logger
from mistral_sdk.transport.auth import APIAuthentication, resolve_authentication
from mistral_sdk.transport.http import (
    OwnedTransport,
    TransportHandle,
    acquire_transport,
    release_transport,
)

if TYPE_CHECKING:
    import httpx

logger = get_logger(__name__)


class MistralClient:
    """Entry point to the Mistral API.

    Handles authentication and owns the HTTP transport shared by the
    ``completions``, ``models`` and ``embeddings`` endpoints.

    When no ``client`` is given, an internal ``httpx.AsyncClient`` is
    created and closed together with this object. A caller-supplied
    ``httpx.AsyncClient`` is only borrowed: the caller stays responsible
    for closing it.

    Example:
        >>> async with MistralClient() as client:
        ...     models = await client.models.list_models()
        ...     response = await client.completions.get_completion(
        ...         ChatCompletionRequest(
        ...             model="mistral-small-latest",
        ...             messages=[ChatMessage.user("Hello!")],
        ...         )
        ...     )
    """

    def __init__(
        self,
        api_key: APIAuthentication | str | None = None,
        client: httpx.AsyncClient | None = None,
        *,
        config: ClientConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Create a client.

        Args:
            api_key: Credential or key string; falls back to MISTRAL_API_KEY
            client: Optional httpx client to borrow instead of creating one
            config: URL layout, version, timeouts and pool settings;
                read from the environment when omitted
            environ: Environment mapping used for the credential and
                the default config (defaults to os.environ)

        Raises:
            ConfigurationError: If no API key can be resolved or an
                environment setting is invalid
        """
        # Resolve before any transport is created so a failure leaks nothing
        auth = resolve_authentication(api_key, environ)
        self._config = config or ClientConfig.from_env(environ)
        self._context = RequestContext(
            auth=auth,
            transport=acquire_transport(client, self._config),
            config=self._config,
            policy=DEFAULT_POLICY,
        )

        self.completions = CompletionsEndpoint(self._context)
        self.models = ModelsEndpoint(self._context)
        self.embeddings = EmbeddingsEndpoint(self._context)

        logger.debug(
            "Initialized MistralClient",
            api_version=self._config.api_version,
            owns_transport=self.owns_transport,
        )

    @property
    def auth(self) -> APIAuthentication:
        """The credential used for every call."""
        return self._context.auth

    @property
    def config(self) -> ClientConfig:
        """Get the client configuration."""
        return self._config

    @property
    def api_version(self) -> str:
        """Version segment of the REST API."""
        return self._config.api_version

    @property
    def transport(self) -> TransportHandle:
        """The owned or borrowed transport handle."""
        return self._context.transport

    @property
    def owns_transport(self) -> bool:
        """Whether closing this client closes the HTTP transport."""
        return isinstance(self._context.transport, OwnedTransport)

    @property
    def is_closed(self) -> bool:
        """Check if the client has been closed."""
        return self._context.closed

    async def aclose(self) -> None:
        """Release the client.

        Closes the HTTP transport if this client created it; a borrowed
        transport is left untouched. Safe to call more than once.
        """
        if self._context.closed:
            return
        self._context.mark_closed()
        closed = await release_transport(self._context.transport)
        logger.debug("Closed MistralClient", transport_closed=closed)

    async def __aenter__(self) -> MistralClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"MistralClient(api_version={self.api_version!r}, "
            f"owns_transport={self.owns_transport}, closed={self.is_closed})"
        )
