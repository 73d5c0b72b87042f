from __future__ import annotations

from collections.abc import Iterable

from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.domain.entities.service_catalog import ServiceCatalogEntry
from salon_booking.infrastructure.knowledge.service_catalog_data import SERVICE_ALIASES, SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(
        self,
        catalog: dict[str, ServiceCatalogEntry] | None = None,
        aliases: dict[str, str] | None = None,
        default_minutes: int = 30,
    ) -> None:
        self._catalog = catalog if catalog is not None else SERVICE_CATALOG
        self._aliases = aliases if aliases is not None else SERVICE_ALIASES
        self._default_minutes = default_minutes
        self._validate()

    def _validate(self) -> None:
        if self._default_minutes <= 0:
            raise ValueError(f"default service duration must be positive, got {self._default_minutes}")
        for key, entry in self._catalog.items():
            if entry.duration_minutes <= 0:
                raise ValueError(f"service {key!r} has non-positive duration {entry.duration_minutes}")
        for alias, target in self._aliases.items():
            if target not in self._catalog:
                raise ValueError(f"alias {alias!r} points at unknown service {target!r}")

    def get_service(self, service_key: str) -> ServiceCatalogEntry | None:
        normalized_key = service_key.lower().strip()
        normalized_key = self._aliases.get(normalized_key, normalized_key)
        return self._catalog.get(normalized_key)

    def get_duration_minutes(self, service_key: str) -> int:
        entry = self.get_service(service_key)
        if not entry:
            return self._default_minutes
        return entry.duration_minutes

    def total_duration_minutes(self, service_keys: Iterable[str]) -> int:
        return sum(self.get_duration_minutes(key) for key in service_keys)

    def list_services(self) -> list[ServiceCatalogEntry]:
        return list(self._catalog.values())
