"""Tests for signature provider adapters."""

from collections.abc import Mapping
from unittest.mock import MagicMock, patch

import pytest

from web_client.adapters.config import AppConfig
from web_client.adapters.signature import (
    ChainSignatureProvider,
    HttpAgentParserSignatureProvider,
    StaticSignatureProvider,
    UserAgentsSignatureProvider,
    build_signature_provider,
)
from web_client.adapters.signature.engine_tokens import sniff_engine
from web_client.application.client_profile import ClientProfile
from web_client.application.detection_engine import DetectionEngine
from web_client.domain.errors import NoResultFoundError, SignatureProviderUnavailableError
from web_client.domain.models import SignatureResult

ANDROID_CHROME_UA = (
    "Mozilla/5.0 (Linux; Android 13; Pixel 7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
)
IPHONE_SAFARI_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1"
)
LINUX_FIREFOX_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:120.0) Gecko/20100101 Firefox/120.0"
WINDOWS_FIREFOX_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:120.0) Gecko/20100101 Firefox/120.0"
)
LEGACY_EDGE_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/70.0.3538.102 Safari/537.36 Edge/18.19582"
)
IE11_UA = "Mozilla/5.0 (Windows NT 10.0; WOW64; Trident/7.0; rv:11.0) like Gecko"
OPERA_PRESTO_UA = "Opera/9.80 (Windows NT 6.1; WOW64) Presto/2.12.388 Version/12.18"
GOOGLEBOT_UA = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
IPAD_SAFARI_UA = (
    "Mozilla/5.0 (iPad; CPU OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1"
)
ANDROID_TABLET_UA = (
    "Mozilla/5.0 (Linux; Android 13; SM-X700) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class RecordingSignatureProvider(StaticSignatureProvider):
    """Static provider that remembers every call."""

    def __init__(self, result: SignatureResult | None = None) -> None:
        super().__init__(result)
        self.calls: list[tuple[str | None, Mapping[str, str] | None]] = []

    def parse(
        self, user_agent: str | None, headers: Mapping[str, str] | None = None
    ) -> SignatureResult:
        self.calls.append((user_agent, headers))
        return super().parse(user_agent, headers)


class TestSniffEngine:
    """Tests for engine token sniffing."""

    @pytest.mark.parametrize(
        ("user_agent", "expected"),
        [
            (ANDROID_CHROME_UA, ("Blink", "120.0.0.0")),
            (IPHONE_SAFARI_UA, ("Webkit", "605.1.15")),
            (LINUX_FIREFOX_UA, ("Gecko", "120.0")),
            (LEGACY_EDGE_UA, ("EdgeHTML", "18.19582")),
            (IE11_UA, ("Trident", "7.0")),
            (OPERA_PRESTO_UA, ("Presto", "2.12.388")),
            (
                "Mozilla/5.0 (compatible; Konqueror/4.5) KHTML/4.5.4 (like Gecko)",
                ("KHTML", "4.5.4"),
            ),
            ("Amaya/11.4.7 libwww/5.4.2", ("Amaya", "11.4.7")),
            ("curl/8.4.0", ("", "")),
        ],
    )
    def test_engine_tokens(self, user_agent: str, expected: tuple[str, str]) -> None:
        """Given a user agent, when sniffing, then its engine label and version are found."""
        assert sniff_engine(user_agent) == expected


class TestUserAgentsSignatureProvider:
    """Tests for the user-agents backed provider."""

    def test_android_chrome(self) -> None:
        """Given Chrome on Android, then labels use the provider vocabulary."""
        result = UserAgentsSignatureProvider().parse(ANDROID_CHROME_UA)

        assert result.os_name == "Android"
        assert result.browser_name == "Chrome"
        assert result.engine_name == "Blink"
        assert result.device_is_mobile is True
        assert result.is_bot is False

    def test_iphone_safari(self) -> None:
        """Given Safari on iPhone, then OS is iOS and browser Mobile Safari."""
        result = UserAgentsSignatureProvider().parse(IPHONE_SAFARI_UA)

        assert result.os_name == "iOS"
        assert result.browser_name == "Mobile Safari"
        assert result.engine_name == "Webkit"
        assert result.device_is_mobile is True

    def test_linux_firefox(self) -> None:
        """Given Firefox on Linux, then it is a desktop Gecko client."""
        result = UserAgentsSignatureProvider().parse(LINUX_FIREFOX_UA)

        assert result.os_name == "Linux"
        assert result.browser_name == "Firefox"
        assert result.browser_version.startswith("120")
        assert result.engine_name == "Gecko"
        assert result.device_is_mobile is False

    def test_googlebot(self) -> None:
        """Given Googlebot, then it is flagged as a bot."""
        assert UserAgentsSignatureProvider().parse(GOOGLEBOT_UA).is_bot is True

    @pytest.mark.parametrize("user_agent", [IPAD_SAFARI_UA, ANDROID_TABLET_UA])
    def test_tablets_are_mobile(self, user_agent: str) -> None:
        """Given a tablet, then the device flag decides and the client is mobile."""
        result = UserAgentsSignatureProvider().parse(user_agent)

        assert result.device_is_mobile is True
        assert result.is_mobile is None
        assert DetectionEngine.detect_mobile(result) is True

    def test_tablet_mobile_agrees_across_providers(self) -> None:
        """Given an iPad, then either provider yields a mobile profile."""
        for provider in (UserAgentsSignatureProvider(), HttpAgentParserSignatureProvider()):
            profile = ClientProfile(IPAD_SAFARI_UA, signature_provider=provider)

            assert profile.mobile is True

    @pytest.mark.parametrize("user_agent", [None, ""])
    def test_empty_user_agent_is_no_result(self, user_agent: str | None) -> None:
        """Given no user agent, then no result is found."""
        with pytest.raises(NoResultFoundError):
            UserAgentsSignatureProvider().parse(user_agent)

    def test_library_failure_is_unavailable(self) -> None:
        """Given the library raising, then the provider reports itself unavailable."""
        with (
            patch(
                "web_client.adapters.signature.user_agents_provider.parse_user_agent",
                side_effect=RuntimeError("regexes missing"),
            ),
            pytest.raises(SignatureProviderUnavailableError, match="regexes missing"),
        ):
            UserAgentsSignatureProvider().parse(ANDROID_CHROME_UA)

    def test_unrecognized_user_agent_is_no_result(self) -> None:
        """Given a string the library does not recognize, then no result is found."""
        parsed = MagicMock()
        parsed.os.family = "Other"
        parsed.browser.family = "Other"
        parsed.is_bot = False
        with (
            patch(
                "web_client.adapters.signature.user_agents_provider.parse_user_agent",
                return_value=parsed,
            ),
            pytest.raises(NoResultFoundError),
        ):
            UserAgentsSignatureProvider().parse("zzz")


class TestHttpAgentParserSignatureProvider:
    """Tests for the httpagentparser backed provider."""

    def test_windows_firefox(self) -> None:
        """Given Firefox on Windows, then OS and browser are detected."""
        result = HttpAgentParserSignatureProvider().parse(WINDOWS_FIREFOX_UA)

        assert result.os_name == "Windows"
        assert result.browser_name == "Firefox"
        assert result.engine_name == "Gecko"
        assert result.device_is_mobile is False

    def test_distribution_preferred_over_os(self) -> None:
        """Given a detected distribution, then it is used as the OS label."""
        detected = {
            "os": {"name": "Linux"},
            "dist": {"name": "Android", "version": "13"},
            "browser": {"name": "Chrome", "version": "120.0.0.0"},
            "bot": False,
        }
        with patch(
            "web_client.adapters.signature.httpagentparser_provider.httpagentparser.detect",
            return_value=detected,
        ):
            result = HttpAgentParserSignatureProvider().parse(ANDROID_CHROME_UA)

        assert result.os_name == "Android"
        assert result.os_version == "13"
        assert result.device_is_mobile is True

    def test_aliases_applied(self) -> None:
        """Given library-specific names, then they are mapped to provider labels."""
        detected = {
            "os": {"name": "Macintosh"},
            "browser": {"name": "Microsoft Internet Explorer", "version": "5.2"},
            "bot": False,
        }
        with patch(
            "web_client.adapters.signature.httpagentparser_provider.httpagentparser.detect",
            return_value=detected,
        ):
            result = HttpAgentParserSignatureProvider().parse("Mozilla/4.0 (compatible; MSIE 5.2)")

        assert result.os_name == "Mac"
        assert result.browser_name == "Internet Explorer"

    def test_nothing_detected_is_no_result(self) -> None:
        """Given neither OS nor browser detected, then no result is found."""
        with (
            patch(
                "web_client.adapters.signature.httpagentparser_provider.httpagentparser.detect",
                return_value={"platform": {"name": None, "version": None}},
            ),
            pytest.raises(NoResultFoundError),
        ):
            HttpAgentParserSignatureProvider().parse("zzz")

    def test_empty_user_agent_is_no_result(self) -> None:
        """Given an empty user agent, then no result is found."""
        with pytest.raises(NoResultFoundError):
            HttpAgentParserSignatureProvider().parse("")


class TestChainSignatureProvider:
    """Tests for provider chaining."""

    def test_first_match_wins(self) -> None:
        """Given two matching providers, then the first one's result is returned."""
        first = RecordingSignatureProvider(SignatureResult(os_name="Android"))
        second = RecordingSignatureProvider(SignatureResult(os_name="iOS"))

        result = ChainSignatureProvider([first, second]).parse("UA")

        assert result.os_name == "Android"
        assert second.calls == []

    def test_falls_through_on_no_match(self) -> None:
        """Given a first provider without a match, then the next one is tried."""
        first = RecordingSignatureProvider(None)
        second = RecordingSignatureProvider(SignatureResult(os_name="iOS"))

        result = ChainSignatureProvider([first, second]).parse("UA", {"Host": "x"})

        assert result.os_name == "iOS"
        assert first.calls == [("UA", {"Host": "x"})]
        assert second.calls == [("UA", {"Host": "x"})]

    def test_no_match_anywhere_raises(self) -> None:
        """Given no provider matching, then no result is found."""
        chain = ChainSignatureProvider([RecordingSignatureProvider(None)] * 2)

        with pytest.raises(NoResultFoundError):
            chain.parse("UA")

    def test_empty_chain_raises(self) -> None:
        """Given no providers, then no result is found."""
        with pytest.raises(NoResultFoundError):
            ChainSignatureProvider([]).parse("UA")

    def test_fault_stops_chain(self) -> None:
        """Given a broken provider, then the fault propagates and later providers are skipped."""
        broken = MagicMock()
        broken.parse.side_effect = SignatureProviderUnavailableError("down")
        later = RecordingSignatureProvider(SignatureResult())

        with pytest.raises(SignatureProviderUnavailableError):
            ChainSignatureProvider([broken, later]).parse("UA")
        assert later.calls == []


class TestStaticSignatureProvider:
    """Tests for the fixed-result provider."""

    def test_returns_fixed_result(self) -> None:
        """Given a configured result, then every user agent gets it."""
        result = SignatureResult(os_name="Android")
        provider = StaticSignatureProvider(result)

        assert provider.parse("UA") is result
        assert provider.parse("Other/1.0", {"Host": "x"}) is result

    def test_without_result_never_matches(self) -> None:
        """Given no result, then no result is found."""
        with pytest.raises(NoResultFoundError):
            StaticSignatureProvider().parse("UA")

    def test_shared_instance_keeps_no_per_call_state(self) -> None:
        """Given many parses on one instance, then it holds nothing but its result."""
        result = SignatureResult(os_name="iOS")
        provider = StaticSignatureProvider(result)

        for i in range(100):
            provider.parse(f"UA/{i}", {"User-Agent": f"UA/{i}"})

        assert vars(provider) == {"_result": result}


class TestBuildSignatureProvider:
    """Tests for building the provider chain from configuration."""

    def test_default_chain(self) -> None:
        """Given default configuration, then both library providers are chained."""
        chain = build_signature_provider(AppConfig())

        assert [type(p) for p in chain.providers] == [
            UserAgentsSignatureProvider,
            HttpAgentParserSignatureProvider,
        ]

    def test_configured_order(self) -> None:
        """Given a configured order, then the chain follows it."""
        chain = build_signature_provider(AppConfig(signature_providers="httpagentparser"))

        assert [type(p) for p in chain.providers] == [HttpAgentParserSignatureProvider]
