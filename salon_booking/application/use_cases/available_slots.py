from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from salon_booking.application.exceptions import ValidationError
from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.store_hours import StoreHoursPort
from salon_booking.application.utils.overlap import has_overlap
from salon_booking.application.utils.time_of_day import add_minutes
from salon_booking.domain.entities.booking import Booking, TimeSlot
from salon_booking.domain.entities.hours_rule import HoursRule


def compute_available_slots(
    hours: HoursRule,
    bookings: Sequence[Booking],
    day: date,
    duration_minutes: int,
) -> list[TimeSlot]:
    """
    Back-to-back windows of `duration_minutes` from opening time.

    Boundaries are fixed multiples of the duration from opening; a booking that
    blocks one window does not shift the later ones. Generation stops at the
    first window that would run past closing.
    """
    if hours.holiday or duration_minutes <= 0:
        return []
    if hours.open_minute is None or hours.close_minute is None:
        return []

    slots: list[TimeSlot] = []
    current = hours.open_minute
    while current < hours.close_minute:
        candidate_end = add_minutes(current, duration_minutes)
        if candidate_end > hours.close_minute:
            break
        if not has_overlap(bookings, day, current, candidate_end):
            slots.append(TimeSlot(start_minute=current, end_minute=candidate_end))
        current = candidate_end
    return slots


class AvailableSlotsUseCase:
    def __init__(
        self,
        hours: StoreHoursPort,
        store: BookingStorePort,
        catalog: ServiceCatalogPort,
    ) -> None:
        self._hours = hours
        self._store = store
        self._catalog = catalog
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        day: date | None,
        duration_minutes: int | None = None,
        services: Sequence[str] | None = None,
    ) -> list[TimeSlot]:
        if duration_minutes is None and services:
            duration_minutes = self._catalog.total_duration_minutes(services)
        if day is None or duration_minutes is None:
            raise ValidationError("date and duration are required")
        if duration_minutes <= 0:
            raise ValidationError("duration must be positive")

        rule = self._hours.resolve(day)
        if rule.holiday:
            self._logger.info("No slots on holiday", extra={"date": day.isoformat()})
            return []

        slots = compute_available_slots(rule, self._store.list(), day, duration_minutes)
        self._logger.info(
            "Available slots computed: %d slots of %d minutes",
            len(slots),
            duration_minutes,
            extra={"date": day.isoformat()},
        )
        return slots
