from typing import Annotated

from fastapi import Depends, Request

from flightfare.services.booking import BookingService


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
