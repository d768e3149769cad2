"""Signature provider backed by the user-agents library."""

from collections.abc import Mapping

from user_agents import parse as parse_user_agent  # type: ignore[import-untyped]

from web_client.adapters.signature.engine_tokens import sniff_engine
from web_client.domain.errors import NoResultFoundError, SignatureProviderUnavailableError
from web_client.domain.models.signature_result import SignatureResult

# user-agents (ua-parser) family names -> provider labels
OS_ALIASES: dict[str, str] = {
    "Mac OS X": "Mac",
    "Mac OS": "Mac",
    "Windows Mobile": "Windows Phone",
}

BROWSER_ALIASES: dict[str, str] = {
    "IE": "Internet Explorer",
    "IE Mobile": "Internet Explorer",
    "Edge": "Microsoft Edge",
    "Edge Mobile": "Microsoft Edge",
    "Chrome Mobile": "Chrome",
    "Chrome Mobile iOS": "Chrome",
    "Chrome Mobile WebView": "Chrome",
    "HeadlessChrome": "Chrome",
    "Firefox Mobile": "Firefox",
    "Firefox iOS": "Firefox",
    "Opera Mini": "Opera",
    "BlackBerry WebKit": "BlackBerry Browser",
    "Android": "Android Browser",
}

UNKNOWN_FAMILY = "Other"


class UserAgentsSignatureProvider:
    """Matches user agents with the ua-parser regex database via user-agents."""

    def parse(
        self,
        user_agent: str | None,
        headers: Mapping[str, str] | None = None,  # noqa: ARG002
    ) -> SignatureResult:
        """Parse a user-agent string.

        Raises:
            NoResultFoundError: When the string is empty or nothing is recognized.
            SignatureProviderUnavailableError: When the library fails.
        """
        if not user_agent:
            raise NoResultFoundError("empty user agent")

        try:
            ua = parse_user_agent(user_agent)
        except Exception as e:
            raise SignatureProviderUnavailableError(f"user-agents failed to parse: {e}") from e

        os_family = ua.os.family
        browser_family = ua.browser.family
        if os_family == UNKNOWN_FAMILY and browser_family == UNKNOWN_FAMILY and not ua.is_bot:
            raise NoResultFoundError("user-agents recognized neither OS nor browser")

        engine_name, engine_version = sniff_engine(user_agent)
        return SignatureResult(
            os_name=OS_ALIASES.get(os_family, os_family),
            os_version=ua.os.version_string,
            engine_name=engine_name,
            engine_version=engine_version,
            browser_name=BROWSER_ALIASES.get(browser_family, browser_family),
            browser_version=ua.browser.version_string,
            device_is_mobile=ua.is_mobile or ua.is_tablet,
            is_bot=ua.is_bot,
        )
