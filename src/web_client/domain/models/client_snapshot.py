"""Client snapshot domain model."""

from pydantic import BaseModel, ConfigDict

from web_client.domain.models.categories import Browser, DetectionFlag, Engine, Platform


class ClientSnapshot(BaseModel):
    """Every public fact about a web client, fully detected."""

    model_config = ConfigDict(frozen=True)

    user_agent: str | None
    accept_encoding: str | None
    accept_language: str | None
    platform: Platform
    platform_name: str
    platform_version: str
    mobile: bool
    engine: Engine
    engine_name: str
    engine_version: str
    browser: Browser
    browser_name: str
    browser_version: str
    robot: bool
    languages: list[str]
    encodings: list[str]
    headers: dict[str, str]
    detection_flags: list[DetectionFlag]
