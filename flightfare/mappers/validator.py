"""Server-side validation gate for booking requests.

Every rule runs independently and all violations are collected, so a client
that bypasses its own form checks learns about every broken rule at once.
"""

import math
import re
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from flightfare.schemas.booking import FlightType, TravelClass, selectable_meals

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DISCOUNT_CODE_RE = re.compile(r"[a-zA-Z0-9-]+")

_FLIGHT_TYPES = tuple(t.value for t in FlightType)
_TRAVEL_CLASSES = tuple(c.value for c in TravelClass)


def parse_calendar_date(value: Any) -> date | None:
    """Parse a YYYY-MM-DD string, returning None for anything else."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _is_integer(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return _is_number(value)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_booking_request(
    payload: Mapping[str, Any],
    *,
    today: date | None = None,
    meal_options: Iterable[str] | None = None,
) -> list[str]:
    """Return every rule the booking request breaks; an empty list means valid."""
    today = today or date.today()
    meals = tuple(meal_options) if meal_options is not None else selectable_meals()
    errors: list[str] = []

    if not _is_non_empty_string(payload.get("origin")):
        errors.append("Invalid or missing origin. Origin must be a non-empty string.")

    if not _is_non_empty_string(payload.get("destination")):
        errors.append("Invalid or missing destination. Destination must be a non-empty string.")

    departure = parse_calendar_date(payload.get("departureDate"))
    if departure is None:
        errors.append("Invalid or missing departure date format. Expected YYYY-MM-DD.")
    elif departure < today:
        errors.append("Departure date cannot be in the past.")

    if payload.get("returnDate"):
        return_date = parse_calendar_date(payload["returnDate"])
        if return_date is None:
            errors.append("Invalid return date format. Expected YYYY-MM-DD.")
        elif departure is not None and return_date < departure:
            errors.append("Return date cannot be before departure date.")

    passengers = payload.get("passengers")
    if not _is_integer(passengers) or passengers <= 0:
        errors.append("Number of passengers must be a positive integer.")

    flight = payload.get("selectedFlight")
    if not isinstance(flight, Mapping) or not flight.get("id"):
        errors.append(
            "No flight selected for booking or selected flight details are incomplete."
        )
    else:
        price = flight.get("price")
        if not _is_number(price) or price <= 0:
            errors.append(
                "Selected flight has an invalid price. Price must be a positive number."
            )
        flight_type = flight.get("type")
        if not isinstance(flight_type, str) or flight_type not in _FLIGHT_TYPES:
            errors.append(
                'Selected flight has an invalid type. Must be "Domestic" or "International".'
            )

    if "extraBags" in payload:
        extra_bags = payload["extraBags"]
        if not _is_integer(extra_bags) or extra_bags < 0:
            errors.append("Extra bags must be a non-negative integer.")

    meal = payload.get("mealSelection")
    if meal and (not isinstance(meal, str) or meal not in meals):
        errors.append(
            f'Invalid meal selection: "{meal}". Valid options are {", ".join(meals)}.'
        )

    code = payload.get("discountCode")
    if code and (not isinstance(code, str) or not _DISCOUNT_CODE_RE.fullmatch(code)):
        errors.append(
            "Invalid discount code format. Only alphanumeric characters and hyphens are allowed."
        )

    if payload.get("dateOfBirth"):
        birth = parse_calendar_date(payload["dateOfBirth"])
        if birth is None:
            errors.append("Invalid date of birth format. Expected YYYY-MM-DD.")
        elif birth > today:
            errors.append("Date of Birth cannot be in the future.")

    travel_class = payload.get("travelClass")
    if travel_class is not None and (
        not isinstance(travel_class, str) or travel_class not in _TRAVEL_CLASSES
    ):
        errors.append(
            f'Invalid travel class: "{travel_class}". '
            f'Valid options are {", ".join(_TRAVEL_CLASSES)}.'
        )

    insurance = payload.get("hasInsurance")
    if insurance is not None and not isinstance(insurance, bool):
        errors.append("Insurance selection must be a boolean.")

    return errors
