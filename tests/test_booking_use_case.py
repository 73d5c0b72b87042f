"""
Tests for booking creation, confirmation and edits at the use-case level.
"""

from __future__ import annotations

from datetime import date

import pytest

from salon_booking.application.exceptions import ConflictError, NotificationError, ValidationError
from salon_booking.application.ports.notifier import NotifierPort
from salon_booking.application.use_cases.booking import BookingUseCase
from salon_booking.application.utils.time_of_day import parse_time
from salon_booking.domain.entities.hours_rule import HOLIDAY, HoursRule
from salon_booking.infrastructure.hours.memory_hours import MemoryStoreHours
from salon_booking.infrastructure.notifications.mock_notifier import MockNotifier
from salon_booking.infrastructure.store.memory_booking_store import MemoryBookingStore

DAY = date(2024, 6, 1)


class FailingNotifier(NotifierPort):
    def send_booking_confirmation(self, recipient, day, start, end, services) -> None:
        raise NotificationError("smtp down")


def _use_case(notifier: NotifierPort | None = None):
    hours = MemoryStoreHours(default=HoursRule(open_minute=parse_time("09:00"), close_minute=parse_time("18:00")))
    store = MemoryBookingStore(hours=hours)
    return hours, BookingUseCase(store=store, notifier=notifier or MockNotifier())


def _create(uc: BookingUseCase, start: str = "10:00", end: str = "10:30", **overrides):
    fields = dict(
        day=DAY,
        start=start,
        end=end,
        name="Ana",
        phone="555-0100",
        email="ana@example.com",
        services=["Haircut"],
    )
    fields.update(overrides)
    return uc.create(**fields)


def test_create_sends_confirmation():
    notifier = MockNotifier()
    _, uc = _use_case(notifier)
    result = _create(uc)

    assert result.notification_sent is True
    assert result.booking.services == ("Haircut",)
    assert notifier.sent == [
        {"recipient": "ana@example.com", "date": DAY, "start": "10:00", "end": "10:30", "services": ["Haircut"]}
    ]


def test_notification_failure_keeps_booking():
    _, uc = _use_case(FailingNotifier())
    result = _create(uc)

    assert result.notification_sent is False
    assert "smtp down" in result.notification_error
    assert uc.get(result.booking.id) == result.booking


@pytest.mark.parametrize(
    "overrides",
    [
        {"day": None},
        {"start": None},
        {"end": ""},
        {"name": "  "},
        {"phone": None},
        {"email": ""},
        {"services": []},
        {"services": [" "]},
    ],
)
def test_create_requires_every_field(overrides):
    _, uc = _use_case()
    with pytest.raises(ValidationError):
        _create(uc, **overrides)
    assert uc.list() == []


def test_create_rejects_malformed_time():
    _, uc = _use_case()
    with pytest.raises(ValidationError):
        _create(uc, start="10h00")


def test_create_on_holiday_leaves_list_unchanged():
    hours, uc = _use_case()
    _create(uc, start="09:00", end="09:30", day=date(2024, 6, 2))
    hours.set_override(DAY, HOLIDAY)

    before = uc.list()
    with pytest.raises(ConflictError):
        _create(uc)
    assert uc.list() == before


def test_update_into_other_booking_keeps_original_time():
    _, uc = _use_case()
    b = _create(uc, "10:00", "10:30").booking
    _create(uc, "11:00", "12:00")

    with pytest.raises(ConflictError):
        uc.update(b.id, start="11:30", end="12:00")
    assert uc.get(b.id) == b


def test_update_rejects_empty_services():
    _, uc = _use_case()
    b = _create(uc).booking
    with pytest.raises(ValidationError):
        uc.update(b.id, services=[])


def test_update_fields():
    _, uc = _use_case()
    b = _create(uc).booking
    updated = uc.update(b.id, name="Beatriz", start="14:00", end="15:00")
    assert updated.name == "Beatriz"
    assert (updated.start_minute, updated.end_minute) == (parse_time("14:00"), parse_time("15:00"))
    assert updated.email == b.email
