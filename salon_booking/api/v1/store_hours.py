import logging

from fastapi import APIRouter, Depends

from salon_booking.api.v1.errors import to_http_exception
from salon_booking.api.v1.schemas import (
    DefaultHoursUpdateSchema,
    HoursRuleSchema,
    ServiceSchema,
    StoreHoursResponseSchema,
    StoreHoursUpdateResponseSchema,
    StoreHoursUpdateSchema,
)
from salon_booking.application.exceptions import BookingError
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.use_cases.store_hours import StoreHoursUseCase, StoreHoursView
from salon_booking.wiring.dependencies import get_service_catalog, get_store_hours_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def _overrides(view: StoreHoursView) -> dict[str, HoursRuleSchema]:
    return {day.isoformat(): HoursRuleSchema.from_rule(rule) for day, rule in view.overrides.items()}


@router.get("/store-hours", response_model=StoreHoursResponseSchema)
def get_store_hours(uc: StoreHoursUseCase = Depends(get_store_hours_use_case)):
    view = uc.get()
    return StoreHoursResponseSchema(
        default_hours=HoursRuleSchema.from_rule(view.default),
        daily_store_hours=_overrides(view),
    )


@router.post("/store-hours", response_model=StoreHoursUpdateResponseSchema)
def set_store_hours(
    req: StoreHoursUpdateSchema,
    uc: StoreHoursUseCase = Depends(get_store_hours_use_case),
):
    try:
        view = uc.set_for_date(
            day=req.store_date,
            opening=req.opening_hour,
            closing=req.closing_hour,
            holiday=req.holiday,
        )
    except BookingError as e:
        logger.info("Store hours rejected", extra={"reason": str(e)})
        raise to_http_exception(e)

    day = req.store_date.isoformat()
    message = f"{day} marked as holiday." if req.holiday else f"Store hours updated for {day}."
    return StoreHoursUpdateResponseSchema(message=message, daily_store_hours=_overrides(view))


@router.put("/store-hours/default", response_model=StoreHoursResponseSchema)
def set_default_hours(
    req: DefaultHoursUpdateSchema,
    uc: StoreHoursUseCase = Depends(get_store_hours_use_case),
):
    try:
        view = uc.set_default(opening=req.opening_hour, closing=req.closing_hour)
    except BookingError as e:
        raise to_http_exception(e)

    return StoreHoursResponseSchema(
        default_hours=HoursRuleSchema.from_rule(view.default),
        daily_store_hours=_overrides(view),
    )


@router.get("/services", response_model=list[ServiceSchema])
def list_services(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [ServiceSchema.from_entry(entry) for entry in catalog.list_services()]
