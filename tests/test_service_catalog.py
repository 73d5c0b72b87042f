"""
Tests for service durations.
"""

from __future__ import annotations

import pytest

from salon_booking.domain.entities.service_catalog import ServiceCatalogEntry
from salon_booking.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore


def test_colouring_costs_sixty_and_others_thirty():
    catalog = ServiceCatalogStore()
    assert catalog.get_duration_minutes("Hair Colouring") == 60
    assert catalog.get_duration_minutes("Haircut") == 30
    assert catalog.get_duration_minutes("Something New") == 30


def test_lookup_is_normalized_and_aliased():
    catalog = ServiceCatalogStore()
    assert catalog.get_duration_minutes("  HAIR COLOURING ") == 60
    assert catalog.get_duration_minutes("Hair Colour") == 60


def test_total_duration_sums_selection():
    catalog = ServiceCatalogStore()
    assert catalog.total_duration_minutes(["Hair Colouring", "Haircut", "Beard Trim"]) == 120
    assert catalog.total_duration_minutes([]) == 0


def test_catalog_validated_at_startup():
    bad = {"x": ServiceCatalogEntry(service_key="x", display_name="X", duration_minutes=0)}
    with pytest.raises(ValueError):
        ServiceCatalogStore(catalog=bad)
    with pytest.raises(ValueError):
        ServiceCatalogStore(aliases={"y": "missing"})
    with pytest.raises(ValueError):
        ServiceCatalogStore(default_minutes=0)
