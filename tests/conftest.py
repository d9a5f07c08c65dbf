"""Pytest configuration providing shared fixtures."""

from __future__ import annotations

import json
import smtplib
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from salvage_watch.config import ConfigLocator, MailConfig, Settings
from salvage_watch.models import Vehicle


@pytest.fixture
def locator(tmp_path: Path) -> ConfigLocator:
    return ConfigLocator(home=tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mail=MailConfig(sender="watcher@example.com", recipient="", password="secret"),
    )


@pytest.fixture
def make_vehicle() -> Callable[..., Vehicle]:
    def _builder(vin: str, **overrides: Any) -> Vehicle:
        base: dict[str, Any] = {
            "make": "SUBARU",
            "model": "OUTBACK",
            "year": "2004",
            "vin": vin,
            "site": "Cherry Picked Auto Parts",
        }
        base.update(overrides)
        return Vehicle(**base)

    return _builder


def cherry_picked_row(vin: str, make: str = "SUBARU") -> list[str]:
    return ["C", "1042", "2004", make, "OUTBACK", "SILVER", "Wagon", "2.5L", vin, "180000"]


def lkq_row(vin: str, make: str = "Subaru", model: str = "Forester") -> str:
    return f"""
    <tr class="pypvi_resultRow">
      <td class="pypvi_image"><img src="/img.jpg"></td>
      <td class="pypvi_make">
        {make}
        <div class="pypvi_notes">
          <p>Stock #: 1234</p>
          <p>Row: ROW 12</p>
          <p>Space: A5</p>
          <p>Color: Blue</p>
          <p>VIN: {vin}</p>
        </div>
      </td>
      <td class="pypvi_model">{model}</td>
      <td class="pypvi_year">2006</td>
      <td class="pypvi_date">
        9/1/2026
      </td>
    </tr>
    """


@pytest.fixture
def fake_http() -> Callable[..., Callable[..., httpx.Response]]:
    """Build a replacement for ``httpx.Client.request`` serving canned bodies.

    ``routes`` maps a URL prefix to ``(status, body)``; every call is
    recorded in ``handler.calls``.
    """

    def _factory(routes: dict[str, tuple[int, Any]]) -> Callable[..., httpx.Response]:
        calls: list[dict[str, Any]] = []

        def handler(**kwargs: Any) -> httpx.Response:
            calls.append(kwargs)
            request = httpx.Request(kwargs["method"], kwargs["url"], params=kwargs.get("params"))
            for prefix, (status, body) in routes.items():
                if kwargs["url"].startswith(prefix):
                    text = body if isinstance(body, str) else json.dumps(body)
                    return httpx.Response(status, request=request, text=text)
            raise httpx.ConnectError("no route", request=request)

        handler.calls = calls  # type: ignore[attr-defined]
        return handler

    return _factory


class FakeSMTP:
    """In-memory stand-in for ``smtplib.SMTP``."""

    instances: list["FakeSMTP"] = []
    extensions: set[str] = {"starttls", "auth"}
    fail_login: bool = False

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.tls = False
        self.logged_in: tuple[str, str] | None = None
        self.sent: list[Any] = []
        FakeSMTP.instances.append(self)

    def __enter__(self) -> "FakeSMTP":
        return self

    def __exit__(self, *_exc: object) -> None:
        return None

    def ehlo(self) -> None:
        return None

    def has_extn(self, name: str) -> bool:
        return name.lower() in self.extensions

    def starttls(self, context=None) -> None:  # noqa: ARG002
        self.tls = True

    def login(self, user: str, password: str) -> None:
        if self.fail_login:
            raise smtplib.SMTPAuthenticationError(535, b"bad credentials")
        self.logged_in = (user, password)

    def send_message(self, message) -> None:
        self.sent.append(message)


@pytest.fixture
def fake_smtp(monkeypatch: pytest.MonkeyPatch) -> type[FakeSMTP]:
    monkeypatch.setattr(FakeSMTP, "instances", [])
    monkeypatch.setattr(FakeSMTP, "extensions", {"starttls", "auth"})
    monkeypatch.setattr(FakeSMTP, "fail_login", False)
    monkeypatch.setattr("smtplib.SMTP", FakeSMTP)
    return FakeSMTP


@pytest.fixture
def cherry_row() -> Callable[..., list[str]]:
    return cherry_picked_row


@pytest.fixture
def lkq_html() -> Callable[..., str]:
    return lkq_row
