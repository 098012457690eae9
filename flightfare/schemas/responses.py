from pydantic import BaseModel

from flightfare.schemas.booking import BookingConfirmation


class BookingSuccessResponse(BaseModel):
    success: bool = True
    message: str = "Flight booked successfully!"
    booking: BookingConfirmation


class ValidationFailedResponse(BaseModel):
    success: bool = False
    message: str = "Booking request validation failed."
    errors: list[str]


class InternalErrorResponse(BaseModel):
    success: bool = False
    message: str = "Internal server error during booking."
    error: str
