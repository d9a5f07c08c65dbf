"""Pydantic models describing the inventory sources and the mail relay."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class CherryPickedConfig(BaseModel):
    """JSON inventory feed served by Cherry Picked Auto Parts."""

    url: str = "https://www.cherrypickedparts.com/_ext2/inventory/"
    site_name: str = "Cherry Picked Auto Parts"


class LKQConfig(BaseModel):
    """HTML inventory fragment served by LKQ Pick Your Part."""

    url: str = (
        "https://www.lkqpickyourpart.com/DesktopModules/pyp_vehicleInventory/"
        "getVehicleInventory.aspx"
    )
    store: str = "259"
    page: str = "0"
    carbuy_yard_code: str = "1259"
    page_size: str = "25"
    language: str = "en-US"
    thumb_quality: str = "60"
    full_quality: str = "70"
    # The endpoint rejects requests that do not come from the browse page.
    referer: str = (
        "https://www.lkqpickyourpart.com/locations/LKQ_Pick_Your_Part_-_Toledo-259/recents/"
    )
    site_name: str = "LKQ Pick Your Part"

    def query_params(self, make: str) -> dict[str, str]:
        return {
            "store": self.store,
            "page": self.page,
            "filter": make,
            "carbuyYardCode": self.carbuy_yard_code,
            "pageSize": self.page_size,
            "language": self.language,
            "thumbQ": self.thumb_quality,
            "fullQ": self.full_quality,
        }


class MailConfig(BaseModel):
    """Sender credentials and relay coordinates for notifications."""

    sender: str = ""
    recipient: str = ""
    password: str = Field(default="", repr=False)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    # Host the credentials are bound to; must match smtp_host.
    auth_host: str = "smtp.gmail.com"
    subject: str = "New Subarus Found!"

    @field_validator("smtp_port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("smtp_port must be within 1..65535")
        return value


class Settings(BaseModel):
    """Top-level settings for a single watch run."""

    target_make: str = "subaru"
    state_file: str = ".subarus"
    http_timeout: float | None = None
    cherry_picked: CherryPickedConfig = Field(default_factory=CherryPickedConfig)
    lkq: LKQConfig = Field(default_factory=LKQConfig)
    mail: MailConfig = Field(default_factory=MailConfig)

    @field_validator("target_make", mode="before")
    @classmethod
    def _normalise_make(cls, value: Any) -> str:
        text = str(value or "").strip().lower()
        if not text:
            raise ValueError("target_make cannot be empty")
        return text

    @field_validator("http_timeout")
    @classmethod
    def _check_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("http_timeout must be positive or null")
        return value


__all__ = ["CherryPickedConfig", "LKQConfig", "MailConfig", "Settings"]
