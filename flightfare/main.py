import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from flightfare.config import Settings
from flightfare.exceptions.custom import BookingValidationError, PricingError
from flightfare.exceptions.handlers import (
    booking_validation_error_handler,
    pricing_error_handler,
    request_validation_error_handler,
)
from flightfare.routers.booking import router as booking_router
from flightfare.schemas.booking import selectable_meals
from flightfare.services.booking import BookingService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    app.state.booking_service = BookingService(
        selectable_meals(include_deluxe=settings.deluxe_meal_selectable),
        logger=logging.getLogger("flightfare.booking"),
    )

    yield


app = FastAPI(title="Flight Booking", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(BookingValidationError, booking_validation_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(PricingError, pricing_error_handler)

app.include_router(booking_router)


def run() -> None:
    settings = Settings()
    uvicorn.run(
        "flightfare.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
