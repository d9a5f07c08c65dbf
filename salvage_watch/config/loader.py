"""Configuration loading helpers for salvage-watch."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import Settings

HOME_ENV = "SALVAGE_WATCH_HOME"
OVERRIDES_FILENAME = "salvage_watch.yaml"
SENDER_ENV = "SUBARU_NOTIF_FROM"
RECIPIENT_ENV = "SUBARU_NOTIF_TO"
PASSWORD_ENV = "SUBARU_NOTIF_PASS"


def _read_overrides(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"unable to read {path}: {exc}", stage="config") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {path}", stage="config")
    return data


@dataclass(slots=True)
class ConfigLocator:
    """Resolve the working home directory and the files living in it."""

    home: Path | None = None

    def __post_init__(self) -> None:
        if self.home is None:
            env_home = os.environ.get(HOME_ENV)
            self.home = Path(env_home).expanduser() if env_home else Path.cwd()
        self.home = self.home.resolve()

    @property
    def logs_dir(self) -> Path:
        return self.home / "logs"

    def overrides_path(self) -> Path:
        return self.home / OVERRIDES_FILENAME

    def state_path(self, settings: Settings) -> Path:
        path = Path(settings.state_file)
        if not path.is_absolute():
            return self.home / path
        return path


def load_settings(
    locator: ConfigLocator | None = None, environ: Mapping[str, str] | None = None
) -> Settings:
    """Build settings from optional YAML overrides plus the mail environment.

    The environment is read exactly once, here; nothing downstream looks at
    ``os.environ`` again.
    """

    locator = locator or ConfigLocator()
    environ = os.environ if environ is None else environ
    payload: dict = {}
    path = locator.overrides_path()
    if path.exists():
        payload = _read_overrides(path)

    mail = payload.get("mail") or {}
    if not isinstance(mail, dict):
        raise ConfigError(f"'mail' must be a mapping in {path}", stage="config")
    mail = dict(mail)
    for key, env_name in (
        ("sender", SENDER_ENV),
        ("recipient", RECIPIENT_ENV),
        ("password", PASSWORD_ENV),
    ):
        if env_name in environ:
            mail[key] = environ[env_name]
    payload["mail"] = mail

    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}", stage="config") from exc


__all__ = [
    "ConfigLocator",
    "HOME_ENV",
    "PASSWORD_ENV",
    "RECIPIENT_ENV",
    "SENDER_ENV",
    "load_settings",
]
