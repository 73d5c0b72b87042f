from __future__ import annotations

import re

from salon_booking.application.exceptions import TimeFormatError

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^\s*([0-9]{1,2}):([0-9]{2})\s*$")


def parse_time(text: str) -> int:
    """Parse "HH:MM" into minutes since midnight. Raises TimeFormatError."""
    if not isinstance(text, str):
        raise TimeFormatError(f"Invalid time value: {text!r}")
    match = _TIME_RE.match(text)
    if not match:
        raise TimeFormatError(f"Invalid time format: {text!r} (expected HH:MM)")

    hour = int(match.group(1))
    minute = int(match.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise TimeFormatError(f"Time out of range: {text!r}")
    return hour * 60 + minute


def format_time(minutes: int) -> str:
    if not (0 <= minutes < MINUTES_PER_DAY):
        raise TimeFormatError(f"Minute of day out of range: {minutes}")
    hour, minute = divmod(minutes, 60)
    return f"{hour:02d}:{minute:02d}"


def add_minutes(minutes: int, duration: int) -> int:
    # No wraparound past midnight; callers compare against closing time.
    return minutes + duration


def parse_optional_time(text: str | None) -> int | None:
    if text is None or text == "":
        return None
    return parse_time(text)
