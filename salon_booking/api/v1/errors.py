from fastapi import HTTPException

from salon_booking.application.exceptions import BookingError, ConflictError, NotFoundError, ValidationError


def to_http_exception(error: BookingError) -> HTTPException:
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(status_code=409, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=400, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))
