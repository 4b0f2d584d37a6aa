"""
Client module - the MistralClient entry point and its request context.
"""

from mistral_sdk.client.context import RequestContext
from mistral_sdk.client.core import MistralClient

__all__ = [
    "MistralClient",
    "RequestContext",
]
