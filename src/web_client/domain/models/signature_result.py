"""Signature result domain model."""

from pydantic import BaseModel, ConfigDict


class SignatureResult(BaseModel):
    """Structured facts a signature provider extracted from a user-agent string.

    Names are free-text labels in the provider vocabulary (e.g. ``"Android"``,
    ``"Mobile Safari"``); they are classified into closed enumerations later.
    ``is_mobile`` is ``None`` when the provider has no direct mobile indicator,
    in which case ``device_is_mobile`` is authoritative.
    """

    model_config = ConfigDict(frozen=True)

    os_name: str = ""
    os_version: str = ""
    engine_name: str = ""
    engine_version: str = ""
    browser_name: str = ""
    browser_version: str = ""
    device_is_mobile: bool = False
    is_mobile: bool | None = None
    is_bot: bool = False
