"""Application layer - lazy client profile and the detection it drives."""

from web_client.application.client_profile import ClientProfile
from web_client.application.detection_engine import DetectionEngine
from web_client.application.header_normalizer import normalize_headers
from web_client.application.list_parser import parse_list

__all__ = [
    "ClientProfile",
    "DetectionEngine",
    "normalize_headers",
    "parse_list",
]
