import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from salon_booking.application.utils.time_of_day import format_time
from salon_booking.domain.entities.booking import Booking, TimeSlot
from salon_booking.domain.entities.hours_rule import HoursRule
from salon_booking.domain.entities.service_catalog import ServiceCatalogEntry


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class HoursRuleSchema(CamelModel):
    opening_hour: str | None = Field(None, alias="openingHour")
    closing_hour: str | None = Field(None, alias="closingHour")
    holiday: bool = False

    @classmethod
    def from_rule(cls, rule: HoursRule) -> "HoursRuleSchema":
        if rule.holiday:
            return cls(holiday=True)
        return cls(
            opening_hour=format_time(rule.open_minute),
            closing_hour=format_time(rule.close_minute),
            holiday=False,
        )


class StoreHoursResponseSchema(CamelModel):
    default_hours: HoursRuleSchema = Field(alias="defaultHours")
    daily_store_hours: dict[str, HoursRuleSchema] = Field(default_factory=dict, alias="dailyStoreHours")


class StoreHoursUpdateSchema(CamelModel):
    store_date: dt.date | None = Field(None, alias="storeDate")
    opening_hour: str | None = Field(None, alias="openingHour")
    closing_hour: str | None = Field(None, alias="closingHour")
    holiday: bool = False


class DefaultHoursUpdateSchema(CamelModel):
    opening_hour: str | None = Field(None, alias="openingHour")
    closing_hour: str | None = Field(None, alias="closingHour")


class StoreHoursUpdateResponseSchema(CamelModel):
    message: str
    daily_store_hours: dict[str, HoursRuleSchema] = Field(default_factory=dict, alias="dailyStoreHours")


class ServiceSchema(CamelModel):
    name: str
    duration_minutes: int = Field(alias="durationMinutes")
    notes: str | None = None

    @classmethod
    def from_entry(cls, entry: ServiceCatalogEntry) -> "ServiceSchema":
        return cls(name=entry.display_name, duration_minutes=entry.duration_minutes, notes=entry.notes)


class AvailableSlotsRequestSchema(CamelModel):
    date: dt.date | None = None
    duration: int | None = None
    services: list[str] = Field(default_factory=list)


class SlotSchema(CamelModel):
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")

    @classmethod
    def from_slot(cls, slot: TimeSlot) -> "SlotSchema":
        return cls(start_time=format_time(slot.start_minute), end_time=format_time(slot.end_minute))


class BookingRequestSchema(CamelModel):
    date: dt.date | None = None
    start_time: str | None = Field(None, alias="startTime")
    end_time: str | None = Field(None, alias="endTime")
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    services: list[str] = Field(default_factory=list)


class BookingUpdateSchema(CamelModel):
    date: dt.date | None = None
    start_time: str | None = Field(None, alias="startTime")
    end_time: str | None = Field(None, alias="endTime")
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    services: list[str] | None = None
    status: str | None = None


class BookingSchema(CamelModel):
    id: str
    date: dt.date
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    name: str
    phone: str
    email: str
    services: list[str]
    status: str

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingSchema":
        return cls(
            id=booking.id,
            date=booking.date,
            start_time=format_time(booking.start_minute),
            end_time=format_time(booking.end_minute),
            name=booking.name,
            phone=booking.phone,
            email=booking.email,
            services=list(booking.services),
            status=booking.status,
        )


class NotificationStatusSchema(BaseModel):
    sent: bool
    error: str | None = None


class BookingCreatedSchema(BaseModel):
    message: str
    booking: BookingSchema
    notification: NotificationStatusSchema


class MessageSchema(BaseModel):
    message: str
