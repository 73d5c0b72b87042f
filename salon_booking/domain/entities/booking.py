from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Booking:
    id: str
    date: date
    start_minute: int
    end_minute: int
    name: str
    phone: str
    email: str
    services: tuple[str, ...]
    status: str = "booked"


@dataclass(frozen=True)
class BookingDraft:
    """A booking request before the store assigns an id."""

    date: date
    start_minute: int
    end_minute: int
    name: str
    phone: str
    email: str
    services: tuple[str, ...]


@dataclass(frozen=True)
class TimeSlot:
    start_minute: int
    end_minute: int


@dataclass(frozen=True)
class BookingPatch:
    """Partial update; None means "keep the current value"."""

    date: date | None = None
    start_minute: int | None = None
    end_minute: int | None = None
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    services: tuple[str, ...] | None = None
    status: str | None = None

    def touches_interval(self) -> bool:
        return self.date is not None or self.start_minute is not None or self.end_minute is not None
