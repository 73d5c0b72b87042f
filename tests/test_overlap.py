"""
Tests for the half-open interval overlap check.
"""

from __future__ import annotations

from datetime import date

from salon_booking.application.utils.overlap import find_overlapping, has_overlap, intervals_overlap
from salon_booking.application.utils.time_of_day import parse_time
from salon_booking.domain.entities.booking import Booking

DAY = date(2024, 6, 1)


def _booking(booking_id: str, start: str, end: str, day: date = DAY) -> Booking:
    return Booking(
        id=booking_id,
        date=day,
        start_minute=parse_time(start),
        end_minute=parse_time(end),
        name="Ana",
        phone="555-0100",
        email="ana@example.com",
        services=("Haircut",),
    )


def _three_clause(start: int, end: int, other_start: int, other_end: int) -> bool:
    # start inside, end inside, or fully spanning
    return (
        (other_start <= start < other_end)
        or (other_start < end <= other_end)
        or (start <= other_start and end >= other_end)
    )


def test_adjacent_intervals_do_not_overlap():
    existing = [_booking("a", "10:00", "10:30")]
    assert not has_overlap(existing, DAY, parse_time("09:30"), parse_time("10:00"))
    assert not has_overlap(existing, DAY, parse_time("10:30"), parse_time("11:00"))


def test_start_inside_end_inside_and_spanning_overlap():
    existing = [_booking("a", "10:00", "11:00")]
    assert has_overlap(existing, DAY, parse_time("10:30"), parse_time("11:30"))
    assert has_overlap(existing, DAY, parse_time("09:30"), parse_time("10:30"))
    assert has_overlap(existing, DAY, parse_time("09:00"), parse_time("12:00"))
    assert has_overlap(existing, DAY, parse_time("10:15"), parse_time("10:45"))


def test_other_dates_are_ignored():
    existing = [_booking("a", "10:00", "11:00", day=date(2024, 6, 2))]
    assert not has_overlap(existing, DAY, parse_time("10:00"), parse_time("11:00"))


def test_excluded_booking_is_ignored():
    existing = [_booking("a", "10:00", "11:00"), _booking("b", "12:00", "13:00")]
    assert not has_overlap(existing, DAY, parse_time("10:00"), parse_time("11:00"), exclude_id="a")
    assert has_overlap(existing, DAY, parse_time("10:30"), parse_time("12:30"), exclude_id="a")


def test_find_overlapping_returns_conflicts():
    existing = [_booking("a", "10:00", "11:00"), _booking("b", "11:00", "12:00")]
    conflicts = find_overlapping(existing, DAY, parse_time("10:30"), parse_time("11:30"))
    assert [b.id for b in conflicts] == ["a", "b"]


def test_half_open_predicate_matches_three_clause_form():
    points = range(0, 241, 15)
    for start in points:
        for end in points:
            if start >= end:
                continue
            for other_start in points:
                for other_end in points:
                    if other_start >= other_end:
                        continue
                    assert intervals_overlap(start, end, other_start, other_end) == _three_clause(
                        start, end, other_start, other_end
                    )


def test_has_overlap_agrees_with_find_overlapping():
    existing = [_booking("a", "10:00", "11:00"), _booking("b", "13:00", "14:00", day=date(2024, 6, 2))]
    for start, end in [("09:00", "10:00"), ("10:30", "13:30"), ("13:00", "14:00")]:
        for exclude in (None, "a", "b"):
            args = (existing, DAY, parse_time(start), parse_time(end), exclude)
            assert has_overlap(*args) == bool(find_overlapping(*args))
