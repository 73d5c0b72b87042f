from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date


class NotifierPort(ABC):
    @abstractmethod
    def send_booking_confirmation(
        self,
        recipient: str,
        day: date,
        start: str,
        end: str,
        services: Sequence[str],
    ) -> None:
        """Send a booking confirmation. Raises NotificationError on failure."""
        raise NotImplementedError
