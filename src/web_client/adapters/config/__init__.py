"""Configuration adapters."""

from web_client.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
