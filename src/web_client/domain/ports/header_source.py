"""Header source ports."""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


class HeaderSource(Protocol):
    """Port exposing the ambient server variables of the current request.

    Request headers appear as CGI-style keys (``HTTP_USER_AGENT``).
    """

    def server_vars(self) -> Mapping[str, str]:
        """Return a snapshot of the server variables."""
        ...


@runtime_checkable
class AllHeadersSource(Protocol):
    """Optional capability: direct access to every request header."""

    def get_all_headers(self) -> Mapping[str, str]:
        """Return all request headers keyed by header name."""
        ...
