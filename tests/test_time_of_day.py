"""
Tests for HH:MM parsing and formatting.
"""

from __future__ import annotations

import pytest

from salon_booking.application.exceptions import TimeFormatError, ValidationError
from salon_booking.application.utils.time_of_day import add_minutes, format_time, parse_time


def test_parse_time_valid_values():
    assert parse_time("00:00") == 0
    assert parse_time("09:30") == 570
    assert parse_time("9:05") == 545
    assert parse_time("23:59") == 1439


@pytest.mark.parametrize("text", ["24:00", "12:60", "noon", "12", "12:5", "-1:00", "", "12:00:00", "\u0660\u0669:\u0660\u0660"])
def test_parse_time_rejects_malformed(text):
    with pytest.raises(TimeFormatError):
        parse_time(text)


def test_time_format_error_is_validation_error():
    with pytest.raises(ValidationError):
        parse_time("25:00")


def test_format_time_zero_pads():
    assert format_time(0) == "00:00"
    assert format_time(545) == "09:05"
    assert format_time(1439) == "23:59"


def test_format_time_rejects_out_of_range():
    with pytest.raises(TimeFormatError):
        format_time(1440)


def test_add_minutes_does_not_wrap_past_midnight():
    """Overflow past the end of day is left for callers to detect."""
    assert add_minutes(parse_time("17:30"), 30) == parse_time("18:00")
    assert add_minutes(parse_time("23:30"), 60) == 1470


def test_comparison_matches_hour_minute_order():
    assert parse_time("09:59") < parse_time("10:00")
    assert parse_time("10:00") < parse_time("10:01")
