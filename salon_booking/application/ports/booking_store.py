from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.booking import Booking, BookingDraft, BookingPatch


class BookingStorePort(ABC):
    @abstractmethod
    def insert(self, draft: BookingDraft) -> Booking:
        """Store a new booking. Raises ConflictError on holiday or overlap."""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking_id: str, patch: BookingPatch) -> Booking:
        """Merge patch into a booking. Raises NotFoundError or ConflictError."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Booking]:
        raise NotImplementedError
