"""Signature-based detection of platform, engine, browser and robot facts."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from web_client.domain.classification import (
    classify_browser,
    classify_engine,
    classify_platform,
)
from web_client.domain.errors import NoResultFoundError
from web_client.domain.models.categories import Browser, Engine, Platform
from web_client.domain.models.signature_result import SignatureResult
from web_client.domain.ports.signature_provider import SignatureProvider

logger = logging.getLogger(__name__)

# Keep log lines readable for pathological user agents
USER_AGENT_LOG_LIMIT = 200


def truncate_user_agent(user_agent: str | None, limit: int = USER_AGENT_LOG_LIMIT) -> str:
    """Shorten a user-agent string for logging."""
    if user_agent is None:
        return "<none>"
    if len(user_agent) > limit:
        return f"{user_agent[: limit - 3]}..."
    return user_agent


@dataclass(frozen=True)
class PlatformFacts:
    """Detected operating-system facts."""

    platform: Platform = Platform.OTHER
    name: str = ""
    version: str = ""


@dataclass(frozen=True)
class EngineFacts:
    """Detected rendering-engine facts."""

    engine: Engine = Engine.OTHER
    name: str = ""
    version: str = ""


@dataclass(frozen=True)
class BrowserFacts:
    """Detected browser facts."""

    browser: Browser = Browser.OTHER
    name: str = ""
    version: str = ""


class DetectionEngine:
    """Turns signature provider output into categorical client facts.

    Fetching is separate from extraction so a caller can fetch the signature
    once and feed the same result to every extractor. Every extractor accepts
    an absent result (``None``) and falls back to the ``OTHER`` category.
    """

    def __init__(self, signature_provider: SignatureProvider | None = None) -> None:
        """Initialize with an optional signature provider."""
        self._signature_provider = signature_provider

    def fetch_signature(
        self, user_agent: str | None, headers: Mapping[str, str] | None = None
    ) -> SignatureResult | None:
        """Ask the signature provider about a user agent.

        Returns:
            The provider's result, or None when it found no match or when no
            provider is configured. Collaborator faults propagate.
        """
        if self._signature_provider is None:
            logger.debug("No signature provider configured, signature result is absent")
            return None

        try:
            result = self._signature_provider.parse(user_agent, headers)
        except NoResultFoundError:
            logger.debug(f"No signature match for user agent {truncate_user_agent(user_agent)!r}")
            return None

        logger.debug(
            f"Signature match for {truncate_user_agent(user_agent)!r}: "
            f"os={result.os_name!r} engine={result.engine_name!r} browser={result.browser_name!r}"
        )
        return result

    @staticmethod
    def detect_platform(result: SignatureResult | None) -> PlatformFacts:
        """Classify the operating system."""
        if result is None:
            return PlatformFacts()
        return PlatformFacts(
            platform=classify_platform(result.os_name),
            name=result.os_name,
            version=result.os_version,
        )

    @staticmethod
    def detect_engine(result: SignatureResult | None) -> EngineFacts:
        """Classify the rendering engine."""
        if result is None:
            return EngineFacts()
        return EngineFacts(
            engine=classify_engine(result.engine_name),
            name=result.engine_name,
            version=result.engine_version,
        )

    @staticmethod
    def detect_browser(result: SignatureResult | None) -> BrowserFacts:
        """Classify the browser."""
        if result is None:
            return BrowserFacts()
        return BrowserFacts(
            browser=classify_browser(result.browser_name),
            name=result.browser_name,
            version=result.browser_version,
        )

    @staticmethod
    def detect_robot(result: SignatureResult | None) -> bool:
        """Whether the client is a bot."""
        return result is not None and result.is_bot

    @staticmethod
    def detect_mobile(result: SignatureResult | None) -> bool:
        """Whether the client is mobile.

        The provider's direct mobile indicator wins over the device flag.
        """
        if result is None:
            return False
        if result.is_mobile is not None:
            return result.is_mobile
        return result.device_is_mobile
