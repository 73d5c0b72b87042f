from __future__ import annotations

import logging
import smtplib
import ssl
from collections.abc import Sequence
from datetime import date
from email.message import EmailMessage

from salon_booking.application.exceptions import NotificationError
from salon_booking.application.ports.notifier import NotifierPort


class SmtpNotifier(NotifierPort):
    def __init__(
        self,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        sender: str,
        sender_name: str = "Salon Bookings",
        timeout: float = 10.0,
    ) -> None:
        if not host or not sender:
            raise ValueError("SMTP_HOST and SMTP_FROM are required for email notifications")
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender
        self._sender_name = sender_name
        self._timeout = timeout
        self._logger = logging.getLogger(__name__)

    def send_booking_confirmation(
        self,
        recipient: str,
        day: date,
        start: str,
        end: str,
        services: Sequence[str],
    ) -> None:
        try:
            msg = build_confirmation_message(
                sender=f"{self._sender_name} <{self._sender}>",
                recipient=recipient,
                day=day,
                start=start,
                end=end,
                services=services,
            )
            if self._port == 465:
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(self._host, self._port, context=context, timeout=self._timeout) as server:
                    self._login(server)
                    server.send_message(msg)
            else:
                with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                    server.starttls(context=ssl.create_default_context())
                    self._login(server)
                    server.send_message(msg)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            self._logger.error(
                "Booking confirmation failed",
                extra={"date": day.isoformat(), "error": str(e)},
            )
            raise NotificationError(f"Error sending confirmation email: {e}") from e

        self._logger.info("Booking confirmation sent", extra={"date": day.isoformat(), "start": start})

    def _login(self, server: smtplib.SMTP) -> None:
        if self._username and self._password:
            server.login(self._username, self._password)


def build_confirmation_message(
    sender: str,
    recipient: str,
    day: date,
    start: str,
    end: str,
    services: Sequence[str],
) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = "Booking Confirmation"
    msg["From"] = sender
    msg["To"] = recipient
    msg.set_content(
        "Your booking is confirmed!\n"
        f"Date: {day.isoformat()}\n"
        f"Time: {start} to {end}\n"
        f"Services: {', '.join(services)}\n"
    )
    return msg
