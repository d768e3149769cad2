"""Signature provider port."""

from collections.abc import Mapping
from typing import Protocol

from web_client.domain.models.signature_result import SignatureResult


class SignatureProvider(Protocol):
    """Port for matching a user-agent string against a signature database."""

    def parse(
        self, user_agent: str | None, headers: Mapping[str, str] | None = None
    ) -> SignatureResult:
        """Parse a user-agent string, optionally helped by the other request headers.

        Raises:
            NoResultFoundError: When nothing matches the input.
            SignatureProviderUnavailableError: When the provider itself is broken.
        """
        ...
