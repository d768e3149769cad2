"""Ports (interfaces) for the ports-and-adapters architecture."""

from web_client.domain.ports.header_source import AllHeadersSource, HeaderSource
from web_client.domain.ports.signature_provider import SignatureProvider

__all__ = [
    "AllHeadersSource",
    "HeaderSource",
    "SignatureProvider",
]
