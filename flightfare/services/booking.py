import logging
import random
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from flightfare.exceptions.custom import BookingValidationError, PricingError
from flightfare.mappers.pricing import calculate_final_price
from flightfare.mappers.pricing_input import build_pricing_input
from flightfare.mappers.validator import validate_booking_request
from flightfare.schemas.booking import (
    BookingConfirmation,
    CustomerDetails,
    FlightDetails,
    selectable_meals,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_booking_id(now: datetime) -> str:
    return f"BK-{int(now.timestamp() * 1000)}-{random.randint(0, 9999)}"


class BookingService:
    """Validates a booking request, prices it and issues a confirmation.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(
        self,
        meal_options: Iterable[str] | None = None,
        *,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._meal_options = tuple(meal_options) if meal_options is not None else selectable_meals()
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock

    def book(self, payload: Mapping[str, Any]) -> BookingConfirmation:
        now = self._clock()
        errors = validate_booking_request(
            payload,
            today=now.astimezone().date(),
            meal_options=self._meal_options,
        )
        if errors:
            self._logger.warning("Booking validation failed: %s", errors)
            raise BookingValidationError(errors)

        try:
            details = build_pricing_input(payload)
            final_amount = calculate_final_price(details, log=self._logger)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise PricingError(f"Invalid pricing input: {field}: {error['msg']}") from exc
        except ArithmeticError as exc:
            raise PricingError(f"Price could not be computed: {exc}") from exc

        flight = payload["selectedFlight"]
        confirmation = BookingConfirmation(
            booking_id=generate_booking_id(now),
            flight_details=FlightDetails.model_validate(flight),
            passenger_count=details.number_of_passengers,
            booked_extra_bags=details.extra_bags,
            selected_meal=details.meal_selection,
            applied_discount_code=details.discount_code,
            travel_class=details.travel_class,
            has_insurance=bool(details.has_insurance),
            final_amount=final_amount,
            booking_timestamp=now,
            customer_details=CustomerDetails(date_of_birth=payload.get("dateOfBirth") or None),
        )
        self._logger.info(
            "Flight booked: %s flight=%s passengers=%d amount=%.2f",
            confirmation.booking_id,
            flight.get("id"),
            confirmation.passenger_count,
            confirmation.final_amount,
        )
        return confirmation
