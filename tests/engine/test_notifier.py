from __future__ import annotations

import json

import pytest

from salvage_watch.config import MailConfig
from salvage_watch.engine import Notifier
from salvage_watch.errors import ConfigError, MailError


def test_send_uses_relay_and_defaults_recipient(fake_smtp, make_vehicle) -> None:
    notifier = Notifier(MailConfig(sender="me@example.com", password="app-pass"))
    notifier.send([make_vehicle("BBB")])

    (smtp,) = fake_smtp.instances
    assert (smtp.host, smtp.port) == ("smtp.gmail.com", 587)
    assert smtp.tls
    assert smtp.logged_in == ("me@example.com", "app-pass")
    (message,) = smtp.sent
    assert message["From"] == "me@example.com"
    assert message["To"] == "me@example.com"
    assert message["Subject"] == "New Subarus Found!"


def test_message_body_is_indented_json(make_vehicle) -> None:
    notifier = Notifier(
        MailConfig(sender="me@example.com", recipient="you@example.com", password="x")
    )
    message = notifier.build_message([make_vehicle("BBB", color="Blue")])
    body = message.get_content()
    assert message["To"] == "you@example.com"
    assert body.startswith('[\n  {\n    "Make": "SUBARU"')
    assert json.loads(body) == [
        {
            "Make": "SUBARU",
            "Model": "OUTBACK",
            "Year": "2004",
            "VIN": "BBB",
            "Color": "Blue",
            "Mileage": "",
            "EngineSize": "",
            "Row": "",
            "VehicleNumber": "",
            "Description": "",
            "Site": "Cherry Picked Auto Parts",
        }
    ]


@pytest.mark.parametrize(
    ("sender", "password", "message"),
    [
        ("", "secret", "'from' required to send email notification"),
        ("me@example.com", "", "'pass' required to send email notification"),
    ],
)
def test_missing_credentials_fail_before_connecting(
    fake_smtp, make_vehicle, sender: str, password: str, message: str
) -> None:
    notifier = Notifier(MailConfig(sender=sender, recipient="you@example.com", password=password))
    with pytest.raises(ConfigError, match=message):
        notifier.send([make_vehicle("BBB")])
    assert fake_smtp.instances == []


def test_credentials_are_bound_to_auth_host(fake_smtp, make_vehicle) -> None:
    notifier = Notifier(
        MailConfig(
            sender="me@example.com",
            password="secret",
            smtp_host="smtp.example.net",
            auth_host="smtp.gmail.com",
        )
    )
    with pytest.raises(MailError, match="wrong host name"):
        notifier.send([make_vehicle("BBB")])
    assert fake_smtp.instances == []


def test_relay_without_starttls_is_refused(fake_smtp, make_vehicle, monkeypatch) -> None:
    monkeypatch.setattr(fake_smtp, "extensions", {"auth"})
    notifier = Notifier(MailConfig(sender="me@example.com", password="secret"))
    with pytest.raises(MailError, match="STARTTLS"):
        notifier.send([make_vehicle("BBB")])
    (smtp,) = fake_smtp.instances
    assert smtp.logged_in is None
    assert smtp.sent == []


def test_auth_failure_is_mail_error(fake_smtp, make_vehicle, monkeypatch) -> None:
    monkeypatch.setattr(fake_smtp, "fail_login", True)
    notifier = Notifier(MailConfig(sender="me@example.com", password="wrong"))
    with pytest.raises(MailError) as excinfo:
        notifier.send([make_vehicle("BBB")])
    assert excinfo.value.stage == "notify"


def test_long_lines_stay_literal_in_body(make_vehicle) -> None:
    description = "Available On: " + "x" * 90
    notifier = Notifier(MailConfig(sender="me@example.com", password="secret"))
    message = notifier.build_message([make_vehicle("BBB", description=description)])
    assert message["Content-Transfer-Encoding"] == "8bit"
    assert f'"Description": "{description}"' in message.as_string()
