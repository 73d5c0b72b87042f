from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from salon_booking.application.exceptions import NotificationError, ValidationError
from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.application.ports.notifier import NotifierPort
from salon_booking.application.utils.time_of_day import format_time, parse_optional_time, parse_time
from salon_booking.domain.entities.booking import Booking, BookingDraft, BookingPatch


@dataclass(frozen=True)
class BookingResult:
    booking: Booking
    notification_sent: bool
    notification_error: str | None = None


class ManageBookingsUseCase:
    """Lookups and owner edits; never sends mail."""

    def __init__(self, store: BookingStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def update(
        self,
        booking_id: str,
        day: date | None = None,
        start: str | None = None,
        end: str | None = None,
        name: str | None = None,
        phone: str | None = None,
        email: str | None = None,
        services: Sequence[str] | None = None,
        status: str | None = None,
    ) -> Booking:
        if services is not None and not [s for s in services if _clean(s)]:
            raise ValidationError("services must not be empty")
        _check_single_line(name=name, phone=phone, email=email)
        patch = BookingPatch(
            date=day,
            start_minute=parse_optional_time(start),
            end_minute=parse_optional_time(end),
            name=_clean(name) or None,
            phone=_clean(phone) or None,
            email=_clean(email) or None,
            services=tuple(s.strip() for s in services if _clean(s)) if services is not None else None,
            status=_clean(status) or None,
        )
        return self._store.update(booking_id, patch)

    def delete(self, booking_id: str) -> None:
        self._store.delete(booking_id)

    def get(self, booking_id: str) -> Booking:
        return self._store.get(booking_id)

    def list(self) -> list[Booking]:
        return self._store.list()


class BookingUseCase(ManageBookingsUseCase):
    def __init__(self, store: BookingStorePort, notifier: NotifierPort) -> None:
        super().__init__(store)
        self._notifier = notifier

    def create(
        self,
        day: date | None,
        start: str | None,
        end: str | None,
        name: str | None,
        phone: str | None,
        email: str | None,
        services: Sequence[str] | None,
    ) -> BookingResult:
        """
        Validate and store a booking, then send the confirmation.

        A failed confirmation does not undo the booking; it is reported on the
        result so the caller can warn the customer.
        """
        missing = [
            field
            for field, value in (
                ("date", day),
                ("startTime", start),
                ("endTime", end),
                ("name", _clean(name)),
                ("phone", _clean(phone)),
                ("email", _clean(email)),
                ("services", [s for s in services or [] if _clean(s)]),
            )
            if not value
        ]
        if missing:
            raise ValidationError(f"All fields are required (missing: {', '.join(missing)}).")
        _check_single_line(name=name, phone=phone, email=email)

        draft = BookingDraft(
            date=day,
            start_minute=parse_time(start),
            end_minute=parse_time(end),
            name=_clean(name),
            phone=_clean(phone),
            email=_clean(email),
            services=tuple(s.strip() for s in services if _clean(s)),
        )
        booking = self._store.insert(draft)

        try:
            self._notifier.send_booking_confirmation(
                recipient=booking.email,
                day=booking.date,
                start=format_time(booking.start_minute),
                end=format_time(booking.end_minute),
                services=booking.services,
            )
        except NotificationError as e:
            self._logger.exception(
                "Booking stored but confirmation failed",
                extra={"booking_id": booking.id, "error": str(e)},
            )
            return BookingResult(booking=booking, notification_sent=False, notification_error=str(e))

        return BookingResult(booking=booking, notification_sent=True)


def _clean(value: str | None) -> str:
    if value is None:
        return ""
    return value.strip()


def _check_single_line(**fields: str | None) -> None:
    # Contact fields end up in email headers.
    for field, value in fields.items():
        if value and ("\r" in value or "\n" in value):
            raise ValidationError(f"{field} must not contain line breaks")
