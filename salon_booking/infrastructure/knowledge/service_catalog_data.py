from __future__ import annotations

from salon_booking.domain.entities.service_catalog import ServiceCatalogEntry

# Keys are normalized (lowercase, stripped) display names.
SERVICE_CATALOG: dict[str, ServiceCatalogEntry] = {
    "haircut": ServiceCatalogEntry(
        service_key="haircut",
        display_name="Haircut",
        duration_minutes=30,
    ),
    "hair colouring": ServiceCatalogEntry(
        service_key="hair colouring",
        display_name="Hair Colouring",
        duration_minutes=60,
        notes="Includes wash and blow-dry.",
    ),
    "beard trim": ServiceCatalogEntry(
        service_key="beard trim",
        display_name="Beard Trim",
        duration_minutes=30,
    ),
    "hair wash": ServiceCatalogEntry(
        service_key="hair wash",
        display_name="Hair Wash",
        duration_minutes=30,
    ),
    "styling": ServiceCatalogEntry(
        service_key="styling",
        display_name="Styling",
        duration_minutes=30,
    ),
}

# Older owner pages submit the short name.
SERVICE_ALIASES: dict[str, str] = {
    "hair colour": "hair colouring",
    "hair color": "hair colouring",
    "hair coloring": "hair colouring",
}
