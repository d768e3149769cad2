"""Middleware attaching a lazily detected client profile to each request."""

from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from web_client.adapters.headers.asgi_header_source import StarletteHeaderSource
from web_client.domain.ports.header_source import HeaderSource

ProfileFactory = Callable[[HeaderSource], Any]


class ClientProfileMiddleware(BaseHTTPMiddleware):
    """Stores a client profile on ``request.state.client_profile``.

    Nothing is detected here; the profile detects each field when a handler
    first reads it.
    """

    def __init__(
        self,
        app: Callable,
        profile_factory: ProfileFactory,
        header_prefix: str = "HTTP_",
    ) -> None:
        """Initialize client profile middleware.

        Args:
            app: The ASGI application to wrap.
            profile_factory: Builds a profile from the request's header source.
            header_prefix: Prefix used for the synthesized server variables.
        """
        super().__init__(app)
        self.profile_factory = profile_factory
        self.header_prefix = header_prefix

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Attach the profile and continue with the request."""
        header_source = StarletteHeaderSource(request, prefix=self.header_prefix)
        request.state.client_profile = self.profile_factory(header_source)
        response: Response = await call_next(request)
        return response
