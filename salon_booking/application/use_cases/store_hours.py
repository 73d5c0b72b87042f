from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from salon_booking.application.exceptions import ValidationError
from salon_booking.application.ports.store_hours import StoreHoursPort
from salon_booking.application.utils.time_of_day import parse_optional_time
from salon_booking.domain.entities.hours_rule import HoursRule


@dataclass(frozen=True)
class StoreHoursView:
    default: HoursRule
    overrides: dict[date, HoursRule]


class StoreHoursUseCase:
    def __init__(self, hours: StoreHoursPort) -> None:
        self._hours = hours

    def get(self) -> StoreHoursView:
        default, overrides = self._hours.snapshot()
        return StoreHoursView(default=default, overrides=dict(sorted(overrides.items())))

    def set_for_date(
        self,
        day: date | None,
        opening: str | None,
        closing: str | None,
        holiday: bool = False,
    ) -> StoreHoursView:
        if day is None:
            raise ValidationError("date required")

        if holiday:
            self._hours.set_override(day, HoursRule.closed())
            return self.get()

        self._hours.set_override(day, _build_rule(opening, closing))
        return self.get()

    def set_default(self, opening: str | None, closing: str | None) -> StoreHoursView:
        self._hours.set_default(_build_rule(opening, closing))
        return self.get()


def _build_rule(opening: str | None, closing: str | None) -> HoursRule:
    open_minute = parse_optional_time(opening)
    close_minute = parse_optional_time(closing)
    if open_minute is None or close_minute is None:
        raise ValidationError("open/close required unless holiday")
    if open_minute >= close_minute:
        raise ValidationError("open must precede close")
    return HoursRule(open_minute=open_minute, close_minute=close_minute)
