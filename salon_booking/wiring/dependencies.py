from functools import lru_cache
import logging

from salon_booking.core.config import settings
from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.application.ports.notifier import NotifierPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.store_hours import StoreHoursPort
from salon_booking.application.use_cases.available_slots import AvailableSlotsUseCase
from salon_booking.application.use_cases.booking import BookingUseCase, ManageBookingsUseCase
from salon_booking.application.use_cases.store_hours import StoreHoursUseCase
from salon_booking.application.utils.time_of_day import parse_time
from salon_booking.domain.entities.hours_rule import HoursRule
from salon_booking.infrastructure.hours.memory_hours import MemoryStoreHours
from salon_booking.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from salon_booking.infrastructure.notifications.mock_notifier import MockNotifier
from salon_booking.infrastructure.notifications.smtp_notifier import SmtpNotifier
from salon_booking.infrastructure.store.memory_booking_store import MemoryBookingStore


@lru_cache
def get_store_hours() -> StoreHoursPort:
    default = HoursRule(
        open_minute=parse_time(settings.DEFAULT_OPENING_HOUR),
        close_minute=parse_time(settings.DEFAULT_CLOSING_HOUR),
    )
    return MemoryStoreHours(default=default)


@lru_cache
def get_booking_store() -> BookingStorePort:
    return MemoryBookingStore(hours=get_store_hours())


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore(default_minutes=settings.DEFAULT_SERVICE_MINUTES)


@lru_cache
def get_notifier() -> NotifierPort:
    logger = logging.getLogger(__name__)
    logger.info("NOTIFICATIONS_ENABLED=%s ENV=%s", settings.NOTIFICATIONS_ENABLED, settings.ENV)

    if not settings.NOTIFICATIONS_ENABLED:
        logger.info("Using MockNotifier (notifications disabled)")
        return MockNotifier()

    if not settings.SMTP_HOST:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockNotifier (SMTP_HOST missing, ENV=dev/local)")
            return MockNotifier()
        raise ValueError("SMTP_HOST is required to send booking confirmations.")

    logger.info("Using SmtpNotifier host=%s port=%s", settings.SMTP_HOST, settings.SMTP_PORT)
    return SmtpNotifier(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        sender=settings.SMTP_FROM or settings.SMTP_USER or "",
        sender_name=settings.SMTP_FROM_NAME,
    )


def get_store_hours_use_case() -> StoreHoursUseCase:
    return StoreHoursUseCase(hours=get_store_hours())


def get_available_slots_use_case() -> AvailableSlotsUseCase:
    return AvailableSlotsUseCase(
        hours=get_store_hours(),
        store=get_booking_store(),
        catalog=get_service_catalog(),
    )


def get_manage_bookings_use_case() -> ManageBookingsUseCase:
    return ManageBookingsUseCase(store=get_booking_store())


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(store=get_booking_store(), notifier=get_notifier())


def warm_up() -> None:
    """Build the singletons so a bad configuration fails at startup."""
    get_store_hours()
    get_booking_store()
    get_service_catalog()
    get_notifier()
