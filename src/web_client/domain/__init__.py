"""Domain layer - categories, tables and collaborator ports."""

from web_client.domain.models import (
    Browser,
    ClientSnapshot,
    DetectionFlag,
    Engine,
    Platform,
    SignatureResult,
)
from web_client.domain.ports import AllHeadersSource, HeaderSource, SignatureProvider

__all__ = [
    "AllHeadersSource",
    "Browser",
    "ClientSnapshot",
    "DetectionFlag",
    "Engine",
    "HeaderSource",
    "Platform",
    "SignatureProvider",
    "SignatureResult",
]
