"""Signature provider returning a fixed result."""

from collections.abc import Mapping

from web_client.domain.errors import NoResultFoundError
from web_client.domain.models.signature_result import SignatureResult


class StaticSignatureProvider:
    """Returns the same result for every user agent, or never matches."""

    def __init__(self, result: SignatureResult | None = None) -> None:
        """Initialize with the result to return; None means no match."""
        self._result = result

    def parse(
        self,
        user_agent: str | None,  # noqa: ARG002
        headers: Mapping[str, str] | None = None,  # noqa: ARG002
    ) -> SignatureResult:
        """Return the fixed result."""
        if self._result is None:
            raise NoResultFoundError("static provider has no result")
        return self._result
