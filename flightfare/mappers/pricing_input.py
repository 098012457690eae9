from collections.abc import Mapping
from datetime import date
from typing import Any

from flightfare.mappers.validator import parse_calendar_date
from flightfare.schemas.booking import FlightType, MealSelection, PricingInput, TravelClass


def age_on(birth: date, on: date) -> int:
    """Whole years between ``birth`` and ``on``."""
    years = on.year - birth.year
    if (on.month, on.day) < (birth.month, birth.day):
        years -= 1
    return years


def build_pricing_input(payload: Mapping[str, Any]) -> PricingInput:
    """Map a booking request that passed validation to the pricing engine input.

    The passenger age is taken on the departure date, so a passenger turning
    60 before the trip travels at the senior rate.
    """
    flight = payload["selectedFlight"]
    departure = parse_calendar_date(payload.get("departureDate"))
    birth = parse_calendar_date(payload.get("dateOfBirth"))

    passenger_age = None
    if birth is not None and departure is not None:
        passenger_age = max(age_on(birth, departure), 0)

    return PricingInput(
        base_fare=flight["price"],
        number_of_passengers=int(payload["passengers"]),
        flight_type=FlightType(flight["type"]),
        extra_bags=int(payload.get("extraBags", 0)),
        meal_selection=payload.get("mealSelection") or MealSelection.none.value,
        discount_code=payload.get("discountCode") or None,
        passenger_age=passenger_age,
        has_insurance=payload.get("hasInsurance"),
        travel_class=TravelClass(payload.get("travelClass") or TravelClass.economy),
    )
