"""Signature provider adapters."""

import logging
from collections.abc import Callable

from web_client.adapters.config.app_config import AppConfig
from web_client.adapters.signature.chain_provider import ChainSignatureProvider
from web_client.adapters.signature.httpagentparser_provider import (
    HttpAgentParserSignatureProvider,
)
from web_client.adapters.signature.static_provider import StaticSignatureProvider
from web_client.adapters.signature.user_agents_provider import UserAgentsSignatureProvider
from web_client.domain.ports.signature_provider import SignatureProvider

logger = logging.getLogger(__name__)

_PROVIDER_FACTORIES: dict[str, Callable[[], SignatureProvider]] = {
    "user_agents": UserAgentsSignatureProvider,
    "httpagentparser": HttpAgentParserSignatureProvider,
}


def build_signature_provider(config: AppConfig) -> ChainSignatureProvider:
    """Build the provider chain named by the configuration."""
    providers = [_PROVIDER_FACTORIES[name]() for name in config.signature_provider_names]
    logger.info(f"Signature providers: {', '.join(config.signature_provider_names) or 'none'}")
    return ChainSignatureProvider(providers)


__all__ = [
    "ChainSignatureProvider",
    "HttpAgentParserSignatureProvider",
    "StaticSignatureProvider",
    "UserAgentsSignatureProvider",
    "build_signature_provider",
]
