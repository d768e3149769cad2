"""Domain models for web client classification."""

from web_client.domain.models.categories import Browser, DetectionFlag, Engine, Platform
from web_client.domain.models.client_snapshot import ClientSnapshot
from web_client.domain.models.signature_result import SignatureResult

__all__ = [
    "Browser",
    "ClientSnapshot",
    "DetectionFlag",
    "Engine",
    "Platform",
    "SignatureResult",
]
