from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from salon_booking.application.exceptions import TimeFormatError
from salon_booking.application.utils.time_of_day import parse_time


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Your Salon"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    DEFAULT_OPENING_HOUR: str = "09:00"
    DEFAULT_CLOSING_HOUR: str = "18:00"
    DEFAULT_SERVICE_MINUTES: int = 30

    CORS_ORIGINS: list[str] = ["*"]

    NOTIFICATIONS_ENABLED: bool = False
    SMTP_HOST: str | None = None
    SMTP_PORT: int = 465
    SMTP_USER: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_FROM: str | None = None
    SMTP_FROM_NAME: str = "Salon Bookings"

    @model_validator(mode="after")
    def check_default_hours(self) -> "Settings":
        try:
            opening = parse_time(self.DEFAULT_OPENING_HOUR)
            closing = parse_time(self.DEFAULT_CLOSING_HOUR)
        except TimeFormatError as e:
            raise ValueError(str(e)) from e
        if opening >= closing:
            raise ValueError("DEFAULT_OPENING_HOUR must precede DEFAULT_CLOSING_HOUR")
        if self.DEFAULT_SERVICE_MINUTES <= 0:
            raise ValueError("DEFAULT_SERVICE_MINUTES must be positive")
        return self


settings = Settings()
