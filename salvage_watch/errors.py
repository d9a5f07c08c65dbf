"""Error kinds raised at pipeline stage boundaries."""

from __future__ import annotations


class WatchError(Exception):
    """Base class for every fatal pipeline failure."""

    kind = "error"

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        self.stage = stage


class NetworkError(WatchError):
    kind = "network"

    def __init__(
        self, message: str, *, stage: str | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message, stage=stage)
        self.status_code = status_code


class DecodeError(WatchError):
    kind = "decode"


class ConfigError(WatchError):
    kind = "config"


class PersistenceError(WatchError):
    kind = "persistence"


class MailError(WatchError):
    kind = "mail"


__all__ = [
    "ConfigError",
    "DecodeError",
    "MailError",
    "NetworkError",
    "PersistenceError",
    "WatchError",
]
