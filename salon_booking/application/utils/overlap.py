from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date

from salon_booking.domain.entities.booking import Booking


def intervals_overlap(start: int, end: int, other_start: int, other_end: int) -> bool:
    """Half-open [start, end) intersection test."""
    return start < other_end and end > other_start


def _conflicts(
    bookings: Iterable[Booking],
    day: date,
    start: int,
    end: int,
    exclude_id: str | None,
) -> Iterator[Booking]:
    return (
        booking
        for booking in bookings
        if booking.date == day
        and booking.id != exclude_id
        and intervals_overlap(start, end, booking.start_minute, booking.end_minute)
    )


def find_overlapping(
    bookings: Iterable[Booking],
    day: date,
    start: int,
    end: int,
    exclude_id: str | None = None,
) -> list[Booking]:
    return list(_conflicts(bookings, day, start, end, exclude_id))


def has_overlap(
    bookings: Iterable[Booking],
    day: date,
    start: int,
    end: int,
    exclude_id: str | None = None,
) -> bool:
    """True if [start, end) on `day` intersects any booking other than `exclude_id`."""
    return any(_conflicts(bookings, day, start, end, exclude_id))
