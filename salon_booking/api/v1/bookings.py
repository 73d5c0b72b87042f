from fastapi import APIRouter, Depends

from salon_booking.api.v1.errors import to_http_exception
from salon_booking.api.v1.schemas import (
    AvailableSlotsRequestSchema,
    BookingCreatedSchema,
    BookingRequestSchema,
    BookingSchema,
    BookingUpdateSchema,
    MessageSchema,
    NotificationStatusSchema,
    SlotSchema,
)
from salon_booking.application.exceptions import BookingError
from salon_booking.application.use_cases.available_slots import AvailableSlotsUseCase
from salon_booking.application.use_cases.booking import BookingUseCase, ManageBookingsUseCase
from salon_booking.wiring.dependencies import (
    get_available_slots_use_case,
    get_booking_use_case,
    get_manage_bookings_use_case,
)

router = APIRouter()


@router.post("/available-slots", response_model=list[SlotSchema])
def available_slots(
    req: AvailableSlotsRequestSchema,
    uc: AvailableSlotsUseCase = Depends(get_available_slots_use_case),
):
    try:
        slots = uc.execute(day=req.date, duration_minutes=req.duration, services=req.services)
    except BookingError as e:
        raise to_http_exception(e)
    return [SlotSchema.from_slot(slot) for slot in slots]


@router.post("/book", response_model=BookingCreatedSchema, status_code=201)
def book(
    req: BookingRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    try:
        result = uc.create(
            day=req.date,
            start=req.start_time,
            end=req.end_time,
            name=req.name,
            phone=req.phone,
            email=req.email,
            services=req.services,
        )
    except BookingError as e:
        raise to_http_exception(e)

    if result.notification_sent:
        message = "Booking confirmed!"
    else:
        message = "Booking confirmed, but the confirmation email could not be sent."
    return BookingCreatedSchema(
        message=message,
        booking=BookingSchema.from_booking(result.booking),
        notification=NotificationStatusSchema(
            sent=result.notification_sent,
            error=result.notification_error,
        ),
    )


@router.get("/slots", response_model=list[BookingSchema])
def list_bookings(uc: ManageBookingsUseCase = Depends(get_manage_bookings_use_case)):
    return [BookingSchema.from_booking(booking) for booking in uc.list()]


@router.get("/booking/{booking_id}", response_model=BookingSchema)
def get_booking(booking_id: str, uc: ManageBookingsUseCase = Depends(get_manage_bookings_use_case)):
    try:
        booking = uc.get(booking_id)
    except BookingError as e:
        raise to_http_exception(e)
    return BookingSchema.from_booking(booking)


@router.put("/booking/{booking_id}", response_model=BookingSchema)
def update_booking(
    booking_id: str,
    req: BookingUpdateSchema,
    uc: ManageBookingsUseCase = Depends(get_manage_bookings_use_case),
):
    try:
        booking = uc.update(
            booking_id,
            day=req.date,
            start=req.start_time,
            end=req.end_time,
            name=req.name,
            phone=req.phone,
            email=req.email,
            services=req.services,
            status=req.status,
        )
    except BookingError as e:
        raise to_http_exception(e)
    return BookingSchema.from_booking(booking)


@router.delete("/booking/{booking_id}", response_model=MessageSchema)
def delete_booking(booking_id: str, uc: ManageBookingsUseCase = Depends(get_manage_bookings_use_case)):
    try:
        uc.delete(booking_id)
    except BookingError as e:
        raise to_http_exception(e)
    return MessageSchema(message="Booking deleted successfully.")
