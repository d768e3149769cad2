"""Lazily detected facts about the web client behind one request."""

import contextlib
import threading
from collections.abc import Callable, Mapping
from contextlib import AbstractContextManager

from web_client.application.detection_engine import DetectionEngine
from web_client.application.header_normalizer import DEFAULT_HEADER_PREFIX, normalize_headers
from web_client.application.list_parser import parse_list
from web_client.domain.models.categories import Browser, DetectionFlag, Engine, Platform
from web_client.domain.models.client_snapshot import ClientSnapshot
from web_client.domain.models.signature_result import SignatureResult
from web_client.domain.ports.header_source import AllHeadersSource, HeaderSource
from web_client.domain.ports.signature_provider import SignatureProvider


class ClientProfile:
    """Categorical facts about a web client, detected on first access.

    Every field is computed at most once per instance. The signature provider is
    consulted at most once, on the first access to any platform, engine,
    browser, robot or mobile field, and its result (or its absence) is shared by
    all of them. Languages, encodings and headers never touch the provider.

    Instances are request-scoped. Pass ``thread_safe=True`` when several threads
    may read the same instance before its fields have been detected.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        accept_encoding: str | None = None,
        accept_language: str | None = None,
        *,
        header_source: HeaderSource | AllHeadersSource | None = None,
        signature_provider: SignatureProvider | None = None,
        header_prefix: str = DEFAULT_HEADER_PREFIX,
        thread_safe: bool = False,
    ) -> None:
        """Initialize with explicit header values, falling back to the header source.

        Args:
            user_agent: User-agent text. Omitted or empty uses the source's value.
            accept_encoding: Accept-Encoding text, with the same fallback.
            accept_language: Accept-Language text, with the same fallback.
            header_source: Ambient request context for implicit values and headers.
            signature_provider: Matches user agents; without one every
                signature-derived field takes its default.
            header_prefix: Prefix of header keys among the server variables.
            thread_safe: Guard detection with a per-instance lock.
        """
        self._header_source = header_source
        self._header_prefix = header_prefix
        self._engine = DetectionEngine(signature_provider)
        self._lock: AbstractContextManager[object] = (
            threading.RLock() if thread_safe else contextlib.nullcontext()
        )

        # Empty explicit values count as omitted
        ambient: Mapping[str, str] = {}
        if not (user_agent and accept_encoding and accept_language):
            ambient = self._ambient_values()
        self._user_agent = user_agent or ambient.get("user-agent") or None
        self._accept_encoding = accept_encoding or ambient.get("accept-encoding") or None
        self._accept_language = accept_language or ambient.get("accept-language") or None

        self._detection: set[DetectionFlag] = set()
        self._signature_fetched = False
        self._signature: SignatureResult | None = None

        self._platform = Platform.OTHER
        self._platform_name = ""
        self._platform_version = ""
        self._mobile = False
        self._engine_code = Engine.OTHER
        self._engine_name = ""
        self._engine_version = ""
        self._browser = Browser.OTHER
        self._browser_name = ""
        self._browser_version = ""
        self._robot = False
        self._languages: list[str] = []
        self._encodings: list[str] = []
        self._headers: dict[str, str] = {}

        self._detectors: dict[DetectionFlag, Callable[[], None]] = {
            DetectionFlag.PLATFORM: self._detect_platform,
            DetectionFlag.ENGINE: self._detect_engine,
            DetectionFlag.BROWSER: self._detect_browser,
            DetectionFlag.ROBOT: self._detect_robot,
            DetectionFlag.MOBILE: self._detect_mobile,
            DetectionFlag.ACCEPT_LANGUAGE: self._detect_languages,
            DetectionFlag.ACCEPT_ENCODING: self._detect_encodings,
            DetectionFlag.HEADERS: self._detect_headers,
        }

    def _ambient_values(self) -> dict[str, str]:
        """Header values of the request context keyed by lower-case header name.

        A source exposing all headers directly is asked for them; otherwise the
        prefixed server variables are translated to header names.
        """
        if isinstance(self._header_source, AllHeadersSource):
            headers = self._header_source.get_all_headers()
            return {name.lower(): value for name, value in headers.items()}

        server_vars = getattr(self._header_source, "server_vars", None)
        if not callable(server_vars):
            return {}
        prefix = self._header_prefix
        return {
            key[len(prefix) :].replace("_", "-").lower(): value
            for key, value in server_vars().items()
            if key.startswith(prefix)
        }

    def _ensure(self, flag: DetectionFlag) -> None:
        """Run the detection routine for ``flag`` unless it already ran."""
        if flag in self._detection:
            return
        with self._lock:
            if flag in self._detection:
                return
            self._detectors[flag]()
            self._detection.add(flag)

    def _ensure_signature(self) -> SignatureResult | None:
        """Fetch the signature result once, recording an absent result too."""
        with self._lock:
            if not self._signature_fetched:
                headers = None
                if isinstance(self._header_source, AllHeadersSource):
                    headers = self.headers
                self._signature = self._engine.fetch_signature(self._user_agent, headers)
                self._signature_fetched = True
        return self._signature

    def _detect_platform(self) -> None:
        facts = self._engine.detect_platform(self._ensure_signature())
        self._platform = facts.platform
        self._platform_name = facts.name
        self._platform_version = facts.version

    def _detect_engine(self) -> None:
        facts = self._engine.detect_engine(self._ensure_signature())
        self._engine_code = facts.engine
        self._engine_name = facts.name
        self._engine_version = facts.version

    def _detect_browser(self) -> None:
        facts = self._engine.detect_browser(self._ensure_signature())
        self._browser = facts.browser
        self._browser_name = facts.name
        self._browser_version = facts.version

    def _detect_robot(self) -> None:
        self._robot = self._engine.detect_robot(self._ensure_signature())

    def _detect_mobile(self) -> None:
        self._mobile = self._engine.detect_mobile(self._ensure_signature())

    def _detect_languages(self) -> None:
        self._languages = parse_list(self._accept_language)

    def _detect_encodings(self) -> None:
        self._encodings = parse_list(self._accept_encoding)

    def _detect_headers(self) -> None:
        self._headers = normalize_headers(self._header_source, self._header_prefix)

    @property
    def user_agent(self) -> str | None:
        """The raw user-agent string."""
        return self._user_agent

    @property
    def accept_encoding(self) -> str | None:
        """The raw Accept-Encoding value."""
        return self._accept_encoding

    @property
    def accept_language(self) -> str | None:
        """The raw Accept-Language value."""
        return self._accept_language

    @property
    def platform(self) -> Platform:
        """Operating-system category."""
        self._ensure(DetectionFlag.PLATFORM)
        return self._platform

    @property
    def platform_name(self) -> str:
        """Operating-system label reported by the signature provider."""
        self._ensure(DetectionFlag.PLATFORM)
        return self._platform_name

    @property
    def platform_version(self) -> str:
        """Operating-system version."""
        self._ensure(DetectionFlag.PLATFORM)
        return self._platform_version

    @property
    def mobile(self) -> bool:
        """Whether the client is a mobile or tablet device."""
        self._ensure(DetectionFlag.MOBILE)
        return self._mobile

    @property
    def engine(self) -> Engine:
        """Rendering-engine category."""
        self._ensure(DetectionFlag.ENGINE)
        return self._engine_code

    @property
    def engine_name(self) -> str:
        """Rendering-engine label reported by the signature provider."""
        self._ensure(DetectionFlag.ENGINE)
        return self._engine_name

    @property
    def engine_version(self) -> str:
        """Rendering-engine version."""
        self._ensure(DetectionFlag.ENGINE)
        return self._engine_version

    @property
    def browser(self) -> Browser:
        """Browser category."""
        self._ensure(DetectionFlag.BROWSER)
        return self._browser

    @property
    def browser_name(self) -> str:
        """Browser label reported by the signature provider."""
        self._ensure(DetectionFlag.BROWSER)
        return self._browser_name

    @property
    def browser_version(self) -> str:
        """Browser version."""
        self._ensure(DetectionFlag.BROWSER)
        return self._browser_version

    @property
    def robot(self) -> bool:
        """Whether the client is a bot."""
        self._ensure(DetectionFlag.ROBOT)
        return self._robot

    @property
    def languages(self) -> list[str]:
        """Accepted languages in the order the client sent them."""
        self._ensure(DetectionFlag.ACCEPT_LANGUAGE)
        return list(self._languages)

    @property
    def encodings(self) -> list[str]:
        """Accepted encodings in the order the client sent them."""
        self._ensure(DetectionFlag.ACCEPT_ENCODING)
        return list(self._encodings)

    @property
    def headers(self) -> dict[str, str]:
        """All request headers keyed by canonical header name."""
        self._ensure(DetectionFlag.HEADERS)
        return dict(self._headers)

    @property
    def signature_result(self) -> SignatureResult | None:
        """The cached signature provider result, None when nothing matched."""
        return self._ensure_signature()

    @property
    def detection_flags(self) -> frozenset[DetectionFlag]:
        """Detection routines that have already run."""
        return frozenset(self._detection)

    def snapshot(self) -> ClientSnapshot:
        """Detect every field and return them as one immutable model."""
        return ClientSnapshot(
            user_agent=self.user_agent,
            accept_encoding=self.accept_encoding,
            accept_language=self.accept_language,
            platform=self.platform,
            platform_name=self.platform_name,
            platform_version=self.platform_version,
            mobile=self.mobile,
            engine=self.engine,
            engine_name=self.engine_name,
            engine_version=self.engine_version,
            browser=self.browser,
            browser_name=self.browser_name,
            browser_version=self.browser_version,
            robot=self.robot,
            languages=self.languages,
            encodings=self.encodings,
            headers=self.headers,
            detection_flags=sorted(self.detection_flags),
        )
