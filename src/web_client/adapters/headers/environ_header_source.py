"""Header source reading CGI/WSGI-style server variables."""

import os
from collections.abc import Mapping
from typing import Any


class EnvironHeaderSource:
    """Exposes a WSGI environ, or the process environment, as server variables.

    Only string values are kept; WSGI environs also carry streams and flags.
    There is no direct all-headers capability, so headers are recovered from
    the ``HTTP_`` keys.
    """

    def __init__(self, environ: Mapping[str, Any] | None = None) -> None:
        """Initialize with an environ mapping, defaulting to ``os.environ``."""
        self._environ = os.environ if environ is None else environ

    def server_vars(self) -> dict[str, str]:
        """Return a snapshot of the string-valued server variables."""
        return {key: value for key, value in self._environ.items() if isinstance(value, str)}
