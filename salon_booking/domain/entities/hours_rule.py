from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HoursRule:
    """Opening window for a day in minutes since midnight, or a holiday."""

    open_minute: int | None = None
    close_minute: int | None = None
    holiday: bool = False

    @classmethod
    def closed(cls) -> "HoursRule":
        return cls(holiday=True)


HOLIDAY = HoursRule.closed()
