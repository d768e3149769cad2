"""Canonical request header mapping built from a header source."""

import logging

from web_client.domain.errors import HeaderSourceUnavailableError
from web_client.domain.ports.header_source import AllHeadersSource, HeaderSource

logger = logging.getLogger(__name__)

DEFAULT_HEADER_PREFIX = "HTTP_"


def canonical_header_name(key: str, prefix: str = DEFAULT_HEADER_PREFIX) -> str:
    """Turn a server variable key into a header name.

    ``HTTP_ACCEPT_LANGUAGE`` becomes ``Accept-Language``. Only the first letter
    of each word is upper-cased, the rest is lower-cased.
    """
    words = key[len(prefix) :].replace("_", " ").lower().split(" ")
    return "-".join(word[:1].upper() + word[1:] for word in words)


def normalize_headers(
    source: HeaderSource | AllHeadersSource | None, prefix: str = DEFAULT_HEADER_PREFIX
) -> dict[str, str]:
    """Build the header name to value mapping of the current request.

    A source offering every header directly is used verbatim. Otherwise the
    source's server variables are scanned for ``prefix``-ed keys, and all other
    keys are ignored. Later keys win when two map to the same header name.

    Raises:
        HeaderSourceUnavailableError: When the source offers neither capability.
    """
    if source is None:
        return {}

    if isinstance(source, AllHeadersSource):
        return dict(source.get_all_headers())

    server_vars = getattr(source, "server_vars", None)
    if not callable(server_vars):
        raise HeaderSourceUnavailableError(
            f"{type(source).__name__} exposes neither get_all_headers() nor server_vars()"
        )

    headers: dict[str, str] = {}
    for key, value in server_vars().items():
        if key.startswith(prefix):
            headers[canonical_header_name(key, prefix)] = value
    logger.debug(f"Normalized {len(headers)} header(s) from server variables")
    return headers
