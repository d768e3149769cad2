"""Header sources for ASGI applications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from web_client.domain.errors import HeaderSourceUnavailableError

if TYPE_CHECKING:
    from starlette.requests import Request


def _decode_header_value(value: Any) -> str:
    """Decode a header value into a readable string."""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return value.decode("latin1", errors="replace")
    return str(value)


def _server_var_name(header_name: str, prefix: str) -> str:
    """Turn a header name into a CGI-style server variable key."""
    return f"{prefix}{header_name.upper().replace('-', '_')}"


class AsgiScopeHeaderSource:
    """Reads request headers from an ASGI scope.

    Header names are returned as the server provided them, which for ASGI is
    lower-case. When a header repeats, the last value wins.
    """

    def __init__(self, scope: dict[str, Any] | None, prefix: str = "HTTP_") -> None:
        """Initialize with an ASGI scope-like mapping."""
        self._scope = scope
        self._prefix = prefix

    def get_all_headers(self) -> dict[str, str]:
        """Return every request header.

        Raises:
            HeaderSourceUnavailableError: When the scope is missing or malformed.
        """
        if not isinstance(self._scope, dict):
            raise HeaderSourceUnavailableError("ASGI scope is not available")

        headers: dict[str, str] = {}
        for pair in self._scope.get("headers") or []:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise HeaderSourceUnavailableError(f"Malformed ASGI header entry: {pair!r}")
            name, value = pair
            headers[_decode_header_value(name)] = _decode_header_value(value)
        return headers

    def server_vars(self) -> dict[str, str]:
        """Return the headers as CGI-style server variables."""
        return {
            _server_var_name(name, self._prefix): value
            for name, value in self.get_all_headers().items()
        }


class StarletteHeaderSource:
    """Reads request headers from a Starlette request."""

    def __init__(self, request: Request, prefix: str = "HTTP_") -> None:
        """Initialize with the request being handled."""
        self._request = request
        self._prefix = prefix

    def get_all_headers(self) -> dict[str, str]:
        """Return every request header, the last value winning on repeats."""
        return dict(self._request.headers.items())

    def server_vars(self) -> dict[str, str]:
        """Return the headers as CGI-style server variables."""
        return {
            _server_var_name(name, self._prefix): value
            for name, value in self.get_all_headers().items()
        }
