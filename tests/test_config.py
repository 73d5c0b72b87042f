"""
Tests for settings validation at startup.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from salon_booking.core.config import Settings


def test_default_settings_are_valid():
    s = Settings(_env_file=None)
    assert s.DEFAULT_OPENING_HOUR == "09:00"
    assert s.DEFAULT_CLOSING_HOUR == "18:00"


@pytest.mark.parametrize(
    "overrides",
    [
        {"DEFAULT_OPENING_HOUR": "19:00", "DEFAULT_CLOSING_HOUR": "18:00"},
        {"DEFAULT_OPENING_HOUR": "12:00", "DEFAULT_CLOSING_HOUR": "12:00"},
        {"DEFAULT_OPENING_HOUR": "9am"},
        {"DEFAULT_CLOSING_HOUR": "24:00"},
        {"DEFAULT_SERVICE_MINUTES": 0},
    ],
)
def test_invalid_defaults_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_env_values_are_validated(monkeypatch):
    monkeypatch.setenv("DEFAULT_OPENING_HOUR", "19:00")
    monkeypatch.setenv("DEFAULT_CLOSING_HOUR", "18:00")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
