import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flightfare.schemas.responses import InternalErrorResponse, ValidationFailedResponse

from .custom import BookingValidationError, PricingError

logger = logging.getLogger(__name__)


async def booking_validation_error_handler(
    _request: Request, exc: BookingValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ValidationFailedResponse(errors=exc.errors).model_dump(),
    )


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Malformed booking request: %s", exc.errors())
    return JSONResponse(
        status_code=400,
        content=ValidationFailedResponse(
            errors=["Request body must be a JSON object."]
        ).model_dump(),
    )


async def pricing_error_handler(_request: Request, exc: PricingError) -> JSONResponse:
    logger.error("Error during booking process: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content=InternalErrorResponse(error=exc.message).model_dump(),
    )
