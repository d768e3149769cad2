"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KNOWN_SIGNATURE_PROVIDERS = ("user_agents", "httpagentparser")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="WEB_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Header source configuration
    header_prefix: str = Field(
        default="HTTP_",
        description="Prefix marking request headers among server variables",
    )

    # Signature provider configuration
    signature_providers: str = Field(
        default="user_agents,httpagentparser",
        description="Comma-separated signature providers, tried in order",
    )

    # Client profile configuration
    thread_safe_profiles: bool = Field(
        default=False,
        description="Guard lazy detection with a per-profile lock",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Root log level")

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to TOML file whose [client_profile] table overrides settings",
    )

    @field_validator("header_prefix")
    @classmethod
    def validate_header_prefix(cls, v: str) -> str:
        """Validate header prefix is not empty."""
        if not v:
            raise ValueError("header_prefix must not be empty")
        return v

    @field_validator("signature_providers")
    @classmethod
    def validate_signature_providers(cls, v: str) -> str:
        """Validate every configured provider is known."""
        names = [name.strip() for name in v.split(",") if name.strip()]
        unknown = [name for name in names if name not in KNOWN_SIGNATURE_PROVIDERS]
        if unknown:
            raise ValueError(
                f"unknown signature provider(s) {unknown}, "
                f"expected any of {list(KNOWN_SIGNATURE_PROVIDERS)}"
            )
        return ",".join(names)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @property
    def signature_provider_names(self) -> list[str]:
        """Configured signature providers in order."""
        return [name for name in self.signature_providers.split(",") if name]

    @property
    def log_level_number(self) -> int:
        """Numeric log level for logging.basicConfig."""
        return logging.getLevelNamesMapping()[self.log_level]

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def with_toml_overrides(self) -> "AppConfig":
        """Return a copy with the TOML [client_profile] table applied.

        Values are validated like environment values. Without a config file the
        configuration is returned unchanged.
        """
        if not self.config_file:
            return self

        section = self._load_toml_data().get("client_profile", {})
        if not isinstance(section, dict):
            raise ValueError("TOML config 'client_profile' must be a table")

        if isinstance(section.get("signature_providers"), list):
            section = {
                **section,
                "signature_providers": ",".join(section["signature_providers"]),
            }

        merged = {**self.model_dump(), **section}
        return AppConfig(**merged)
