from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from datetime import date

from salon_booking.application.exceptions import ConflictError, NotFoundError, ValidationError
from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.application.ports.store_hours import StoreHoursPort
from salon_booking.application.utils.overlap import find_overlapping
from salon_booking.application.utils.time_of_day import format_time
from salon_booking.domain.entities.booking import Booking, BookingDraft, BookingPatch


class MemoryBookingStore(BookingStorePort):
    """
    Process-local booking list.

    Every write runs its holiday check, overlap check and commit inside one
    lock, so two requests for the same slot cannot both succeed.
    """

    def __init__(self, hours: StoreHoursPort) -> None:
        self._hours = hours
        self._bookings: list[Booking] = []
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def insert(self, draft: BookingDraft) -> Booking:
        _check_interval(draft.start_minute, draft.end_minute)
        with self._lock:
            self._ensure_bookable(draft.date, draft.start_minute, draft.end_minute, exclude_id=None)
            booking = Booking(
                id=str(uuid.uuid4()),
                date=draft.date,
                start_minute=draft.start_minute,
                end_minute=draft.end_minute,
                name=draft.name,
                phone=draft.phone,
                email=draft.email,
                services=tuple(draft.services),
            )
            self._bookings.append(booking)

        self._logger.info(
            "Booking added",
            extra={
                "booking_id": booking.id,
                "date": booking.date.isoformat(),
                "start": format_time(booking.start_minute),
                "end": format_time(booking.end_minute),
                "services": ", ".join(booking.services),
            },
        )
        return booking

    def update(self, booking_id: str, patch: BookingPatch) -> Booking:
        with self._lock:
            index = self._index_of(booking_id)
            current = self._bookings[index]
            merged = _merge(current, patch)

            if patch.touches_interval():
                _check_interval(merged.start_minute, merged.end_minute)
                self._ensure_bookable(
                    merged.date,
                    merged.start_minute,
                    merged.end_minute,
                    exclude_id=booking_id,
                    check_holiday=patch.date is not None,
                )

            self._bookings[index] = merged

        self._logger.info("Booking updated", extra={"booking_id": booking_id})
        return merged

    def delete(self, booking_id: str) -> None:
        with self._lock:
            index = self._index_of(booking_id)
            del self._bookings[index]
        self._logger.info("Booking deleted", extra={"booking_id": booking_id})

    def get(self, booking_id: str) -> Booking:
        with self._lock:
            return self._bookings[self._index_of(booking_id)]

    def list(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings)

    def _index_of(self, booking_id: str) -> int:
        for index, booking in enumerate(self._bookings):
            if booking.id == booking_id:
                return index
        raise NotFoundError("Booking not found.")

    def _ensure_bookable(
        self,
        day: date,
        start: int,
        end: int,
        exclude_id: str | None,
        check_holiday: bool = True,
    ) -> None:
        if check_holiday and self._hours.resolve(day).holiday:
            self._logger.info(
                "Booking rejected", extra={"date": day.isoformat(), "reason": "holiday"}
            )
            raise ConflictError("Cannot book on a holiday.")

        conflicts = find_overlapping(self._bookings, day, start, end, exclude_id=exclude_id)
        if conflicts:
            self._logger.info(
                "Booking rejected",
                extra={
                    "date": day.isoformat(),
                    "start": format_time(start),
                    "end": format_time(end),
                    "reason": f"overlaps {conflicts[0].id}",
                },
            )
            raise ConflictError("Slot overlaps with an existing booking.")


def _check_interval(start: int, end: int) -> None:
    if start >= end:
        raise ValidationError("start time must precede end time")


def _merge(current: Booking, patch: BookingPatch) -> Booking:
    changes = {
        field: value
        for field, value in (
            ("date", patch.date),
            ("start_minute", patch.start_minute),
            ("end_minute", patch.end_minute),
            ("name", patch.name),
            ("phone", patch.phone),
            ("email", patch.email),
            ("services", patch.services),
            ("status", patch.status),
        )
        if value is not None
    }
    return replace(current, **changes)
