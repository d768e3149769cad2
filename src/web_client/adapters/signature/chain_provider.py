"""Signature provider composing several providers."""

import logging
from collections.abc import Mapping, Sequence

from web_client.domain.errors import NoResultFoundError
from web_client.domain.models.signature_result import SignatureResult
from web_client.domain.ports.signature_provider import SignatureProvider

logger = logging.getLogger(__name__)


class ChainSignatureProvider:
    """Tries providers in order and returns the first match.

    A provider reporting no match hands over to the next one. Any other
    failure propagates immediately.
    """

    def __init__(self, providers: Sequence[SignatureProvider]) -> None:
        """Initialize with the providers to try, most trusted first."""
        self._providers = list(providers)

    @property
    def providers(self) -> list[SignatureProvider]:
        """The chained providers in order."""
        return list(self._providers)

    def parse(
        self, user_agent: str | None, headers: Mapping[str, str] | None = None
    ) -> SignatureResult:
        """Parse with the first provider that finds a match.

        Raises:
            NoResultFoundError: When no provider matches.
        """
        for provider in self._providers:
            try:
                return provider.parse(user_agent, headers)
            except NoResultFoundError:
                logger.debug(f"{type(provider).__name__} found no match, trying next provider")
        raise NoResultFoundError(f"none of {len(self._providers)} provider(s) matched")
