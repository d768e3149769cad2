"""Header source adapters."""

from web_client.adapters.headers.asgi_header_source import (
    AsgiScopeHeaderSource,
    StarletteHeaderSource,
)
from web_client.adapters.headers.environ_header_source import EnvironHeaderSource

__all__ = [
    "AsgiScopeHeaderSource",
    "EnvironHeaderSource",
    "StarletteHeaderSource",
]
