"""Wiring of configuration, adapters and client profiles."""

from collections.abc import Callable

from starlette.applications import Starlette

from web_client.adapters.config import AppConfig
from web_client.adapters.signature import build_signature_provider
from web_client.adapters.web import ClientProfileMiddleware
from web_client.application.client_profile import ClientProfile
from web_client.domain.ports.header_source import AllHeadersSource, HeaderSource

ProfileFactory = Callable[[HeaderSource | AllHeadersSource | None], ClientProfile]


def build_profile_factory(config: AppConfig) -> ProfileFactory:
    """Build a factory creating one client profile per request.

    The signature provider is built once and shared by every profile.
    """
    signature_provider = build_signature_provider(config)

    def create_profile(header_source: HeaderSource | AllHeadersSource | None) -> ClientProfile:
        return ClientProfile(
            header_source=header_source,
            signature_provider=signature_provider,
            header_prefix=config.header_prefix,
            thread_safe=config.thread_safe_profiles,
        )

    return create_profile


def install_client_profile_middleware(app: Starlette, config: AppConfig | None = None) -> None:
    """Make ``request.state.client_profile`` available to every handler of ``app``."""
    config = config or AppConfig()
    app.add_middleware(
        ClientProfileMiddleware,
        profile_factory=build_profile_factory(config),
        header_prefix=config.header_prefix,
    )
