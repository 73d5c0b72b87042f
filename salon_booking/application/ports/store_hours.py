from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from salon_booking.domain.entities.hours_rule import HoursRule


class StoreHoursPort(ABC):
    @abstractmethod
    def resolve(self, day: date) -> HoursRule:
        """Return the effective rule for a date: override if present, else default."""
        raise NotImplementedError

    @abstractmethod
    def set_override(self, day: date, rule: HoursRule) -> None:
        """Replace any prior override for the date. Raises ValidationError."""
        raise NotImplementedError

    @abstractmethod
    def set_default(self, rule: HoursRule) -> None:
        raise NotImplementedError

    @abstractmethod
    def snapshot(self) -> tuple[HoursRule, dict[date, HoursRule]]:
        """Return (default rule, copy of the override map)."""
        raise NotImplementedError
