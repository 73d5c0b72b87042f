from __future__ import annotations

import logging
import threading
from datetime import date

from salon_booking.application.exceptions import ValidationError
from salon_booking.application.ports.store_hours import StoreHoursPort
from salon_booking.application.utils.time_of_day import format_time
from salon_booking.domain.entities.hours_rule import HoursRule


def validate_rule(rule: HoursRule) -> None:
    if rule.holiday:
        return
    if rule.open_minute is None or rule.close_minute is None:
        raise ValidationError("open/close required unless holiday")
    if rule.open_minute >= rule.close_minute:
        raise ValidationError("open must precede close")


class MemoryStoreHours(StoreHoursPort):
    def __init__(self, default: HoursRule) -> None:
        if default.holiday:
            raise ValidationError("default hours cannot be a holiday")
        validate_rule(default)
        self._default = default
        self._overrides: dict[date, HoursRule] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def resolve(self, day: date) -> HoursRule:
        with self._lock:
            override = self._overrides.get(day)
            if override is None:
                return self._default
            return override

    def set_override(self, day: date, rule: HoursRule) -> None:
        validate_rule(rule)
        with self._lock:
            self._overrides[day] = rule
        if rule.holiday:
            self._logger.info("Marked date as holiday", extra={"date": day.isoformat()})
        else:
            self._logger.info(
                "Store hours override set",
                extra={
                    "date": day.isoformat(),
                    "start": format_time(rule.open_minute),
                    "end": format_time(rule.close_minute),
                },
            )

    def set_default(self, rule: HoursRule) -> None:
        if rule.holiday:
            raise ValidationError("default hours cannot be a holiday")
        validate_rule(rule)
        with self._lock:
            self._default = rule
        self._logger.info(
            "Default store hours set",
            extra={"start": format_time(rule.open_minute), "end": format_time(rule.close_minute)},
        )

    def snapshot(self) -> tuple[HoursRule, dict[date, HoursRule]]:
        with self._lock:
            return self._default, dict(self._overrides)
