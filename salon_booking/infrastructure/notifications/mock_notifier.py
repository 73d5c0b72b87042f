from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from salon_booking.application.ports.notifier import NotifierPort


class MockNotifier(NotifierPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.sent: list[dict[str, object]] = []

    def send_booking_confirmation(
        self,
        recipient: str,
        day: date,
        start: str,
        end: str,
        services: Sequence[str],
    ) -> None:
        self.sent.append(
            {"recipient": recipient, "date": day, "start": start, "end": end, "services": list(services)}
        )
        self._logger.info(
            "Mock booking confirmation",
            extra={"date": day.isoformat(), "start": start, "end": end, "services": ", ".join(services)},
        )
