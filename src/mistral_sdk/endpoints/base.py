"""
Common base for endpoint wrappers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mistral_sdk.client.context import RequestContext


class BaseEndpoint:
    """Groups the operations of one API surface.

    Endpoints are stateless: they keep only the request context handed
    to them by the client and share its transport and serialization policy.
    """

    endpoint: str = ""

    def __init__(self, context: RequestContext) -> None:
        self._context = context

    def url(self, *segments: str) -> str:
        """Full URL of this endpoint, optionally with extra path segments."""
        return self._context.config.build_url(self._path(*segments))

    def _path(self, *segments: str) -> str:
        return "/".join([self.endpoint, *(s.strip("/") for s in segments)])
