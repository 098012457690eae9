import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body
from fastapi.responses import PlainTextResponse

from flightfare.dependencies import BookingServiceDep
from flightfare.schemas.responses import (
    BookingSuccessResponse,
    InternalErrorResponse,
    ValidationFailedResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    return "Flight Booking Backend is running!"


@router.post(
    "/api/book",
    response_model=BookingSuccessResponse,
    responses={
        400: {"model": ValidationFailedResponse},
        500: {"model": InternalErrorResponse},
    },
)
async def book_flight(
    service: BookingServiceDep,
    payload: Annotated[dict[str, Any], Body()],
) -> BookingSuccessResponse:
    logger.debug("POST /api/book received: %s", payload)
    confirmation = service.book(payload)
    return BookingSuccessResponse(booking=confirmation)
