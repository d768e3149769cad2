"""Signature provider backed by the httpagentparser library."""

from collections.abc import Mapping
from typing import Any

import httpagentparser  # type: ignore[import-untyped]

from web_client.adapters.signature.engine_tokens import sniff_engine
from web_client.domain.errors import NoResultFoundError, SignatureProviderUnavailableError
from web_client.domain.models.signature_result import SignatureResult

# httpagentparser detector names -> provider labels
OS_ALIASES: dict[str, str] = {
    "Macintosh": "Mac",
    "IPad": "iPad",
    "BlackBerry": "BlackBerry OS",
}

BROWSER_ALIASES: dict[str, str] = {
    "Microsoft Internet Explorer": "Internet Explorer",
    "MSEdge": "Microsoft Edge",
    "ChromiumEdge": "Microsoft Edge",
    "AndroidBrowser": "Android Browser",
}

MOBILE_OS_LABELS = frozenset(
    {"Android", "iOS", "iPhone", "iPad", "Windows Phone", "BlackBerry OS"}
)


def _name_and_version(section: Any) -> tuple[str, str]:
    """Extract name and version from a detection result section."""
    if not isinstance(section, dict):
        return "", ""
    return section.get("name") or "", section.get("version") or ""


class HttpAgentParserSignatureProvider:
    """Matches user agents with httpagentparser's keyword detectors."""

    def parse(
        self,
        user_agent: str | None,
        headers: Mapping[str, str] | None = None,  # noqa: ARG002
    ) -> SignatureResult:
        """Parse a user-agent string.

        The distribution (``Android``, ``iPhone``, ``Ubuntu``) is preferred over
        the generic OS name (``Linux``, ``iOS``) when both are detected.

        Raises:
            NoResultFoundError: When the string is empty or nothing is recognized.
            SignatureProviderUnavailableError: When the library fails.
        """
        if not user_agent:
            raise NoResultFoundError("empty user agent")

        try:
            detected = httpagentparser.detect(user_agent)
        except Exception as e:
            raise SignatureProviderUnavailableError(f"httpagentparser failed: {e}") from e

        os_name, os_version = _name_and_version(detected.get("dist"))
        if not os_name:
            os_name, os_version = _name_and_version(detected.get("os"))
        browser_name, browser_version = _name_and_version(detected.get("browser"))
        is_bot = bool(detected.get("bot"))

        if not os_name and not browser_name:
            raise NoResultFoundError("httpagentparser recognized neither OS nor browser")

        os_name = OS_ALIASES.get(os_name, os_name)
        engine_name, engine_version = sniff_engine(user_agent)
        return SignatureResult(
            os_name=os_name,
            os_version=os_version,
            engine_name=engine_name,
            engine_version=engine_version,
            browser_name=BROWSER_ALIASES.get(browser_name, browser_name),
            browser_version=browser_version,
            device_is_mobile=os_name in MOBILE_OS_LABELS,
            is_bot=is_bot,
        )
