"""E-mail notification of newly found vehicles."""

from __future__ import annotations

import smtplib
import ssl
from email.message import EmailMessage
from typing import Sequence

import structlog

from ..config import MailConfig
from ..errors import ConfigError, MailError
from ..models import Vehicle, dump_vehicles


class Notifier:
    """Send one plain-text mail per run through an authenticated relay."""

    def __init__(self, config: MailConfig, logger: structlog.BoundLogger | None = None) -> None:
        self.config = config
        self.logger = logger or structlog.get_logger("salvage_watch.notifier")

    def _addresses(self) -> tuple[str, str]:
        sender = self.config.sender
        if not sender:
            raise ConfigError("'from' required to send email notification", stage="notify")
        if not self.config.password:
            raise ConfigError("'pass' required to send email notification", stage="notify")
        return sender, self.config.recipient or sender

    def build_message(self, vehicles: Sequence[Vehicle]) -> EmailMessage:
        sender, recipient = self._addresses()
        message = EmailMessage()
        message["From"] = sender
        message["To"] = recipient
        message["Subject"] = self.config.subject
        message.set_content(dump_vehicles(vehicles, indent=2), cte="8bit")
        return message

    def send(self, vehicles: Sequence[Vehicle]) -> None:
        message = self.build_message(vehicles)
        host, port = self.config.smtp_host, self.config.smtp_port
        # Credentials are only ever offered to the host they belong to.
        if host != self.config.auth_host:
            raise MailError("wrong host name", stage="notify")
        try:
            with smtplib.SMTP(host, port) as smtp:
                smtp.ehlo()
                if not smtp.has_extn("starttls"):
                    raise MailError(f"{host} does not offer STARTTLS", stage="notify")
                smtp.starttls(context=ssl.create_default_context())
                smtp.ehlo()
                smtp.login(self.config.sender, self.config.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailError(
                f"sending notification via {host}:{port} failed: {exc}", stage="notify"
            ) from exc
        self.logger.info(
            "notification_sent",
            recipient=message["To"],
            vehicles=len(vehicles),
        )


__all__ = ["Notifier"]
