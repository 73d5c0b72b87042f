class BookingError(Exception):
    """Base class for errors raised at the request boundary."""
    pass


class ValidationError(BookingError):
    """Raised on malformed or missing input."""
    pass


class TimeFormatError(ValidationError):
    """Raised when a time string is not a valid HH:MM value."""
    pass


class ConflictError(BookingError):
    """Raised when an interval overlaps an existing booking or targets a holiday."""
    pass


class NotFoundError(BookingError):
    """Raised when a booking id is unknown."""
    pass


class NotificationError(RuntimeError):
    """Raised when the confirmation sender fails (SMTP errors, misconfiguration)."""
    pass
