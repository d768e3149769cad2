"""Web framework adapters."""

from web_client.adapters.web.client_profile_middleware import ClientProfileMiddleware

__all__ = ["ClientProfileMiddleware"]
