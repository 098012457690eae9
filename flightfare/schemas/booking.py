from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, JsonValue, StrictBool, StrictInt
from pydantic.alias_generators import to_camel


class FlightType(StrEnum):
    domestic = "Domestic"
    international = "International"


class TravelClass(StrEnum):
    economy = "economy"
    business = "business"
    first = "first"


class MealSelection(StrEnum):
    none = "none"
    standard = "standard"
    premium = "premium"
    deluxe = "deluxe"


def selectable_meals(include_deluxe: bool = False) -> tuple[str, ...]:
    """Meal options a customer may pick when booking.

    Pricing knows every MealSelection member; deluxe is only offered at the
    booking gate when explicitly enabled.
    """
    meals = [MealSelection.none, MealSelection.standard, MealSelection.premium]
    if include_deluxe:
        meals.append(MealSelection.deluxe)
    return tuple(m.value for m in meals)


class PricingInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_fare: float
    number_of_passengers: StrictInt
    flight_type: FlightType = FlightType.domestic
    extra_bags: StrictInt = 0
    meal_selection: str | None = MealSelection.none.value  # unknown values price as "none"
    discount_code: str | None = None
    passenger_age: StrictInt | None = None
    has_insurance: StrictBool | None = None
    travel_class: TravelClass = TravelClass.economy


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FlightDetails(_CamelModel):
    id: JsonValue
    airline: JsonValue = None
    flight_number: JsonValue = None
    origin: JsonValue = None
    destination: JsonValue = None
    departure_date: JsonValue = None
    departure_time: JsonValue = None


class CustomerDetails(_CamelModel):
    date_of_birth: str | None = None


class BookingConfirmation(_CamelModel):
    booking_id: str
    flight_details: FlightDetails
    passenger_count: int
    booked_extra_bags: int
    selected_meal: str
    applied_discount_code: str | None = None
    travel_class: TravelClass = TravelClass.economy
    has_insurance: bool = False
    final_amount: float
    status: str = "Confirmed"
    booking_timestamp: datetime
    customer_details: CustomerDetails
