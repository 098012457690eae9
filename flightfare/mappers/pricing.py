"""Final ticket price computation.

Pure functions, no I/O. The pipeline order matters: percentage steps compound
on the absolute additions made before them.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from flightfare.exceptions.custom import PricingError
from flightfare.mappers.discounts import match_discount
from flightfare.schemas.booking import FlightType, MealSelection, PricingInput, TravelClass

logger = logging.getLogger(__name__)

CLASS_MULTIPLIERS: dict[TravelClass, float] = {
    TravelClass.economy: 1.0,
    TravelClass.business: 1.8,
    TravelClass.first: 2.5,
}

INSURANCE_COST_PER_PASSENGER = 30.0

TAX_RATES: dict[FlightType, float] = {
    FlightType.domestic: 0.12,
    FlightType.international: 0.18,
}

SENIOR_AGE = 60
SENIOR_DISCOUNT_RATE = 0.15
CHILD_AGE_LIMIT = 12  # exclusive
CHILD_DISCOUNT_RATE = 0.20

FIRST_BAG_FEE = 50.0
SECOND_BAG_FEE = 75.0
ADDITIONAL_BAG_FEE = 100.0

MEAL_FEES: dict[MealSelection, float] = {
    MealSelection.none: 0.0,
    MealSelection.standard: 15.0,
    MealSelection.premium: 30.0,
    MealSelection.deluxe: 50.0,
}

_CENT = Decimal("0.01")
_ROUNDING_PRECISION = 400  # enough digits for any finite float


def tax_rate(flight_type: FlightType) -> float:
    return TAX_RATES[flight_type]


def age_discount_rate(age: int | None) -> float:
    """Seniors (60+) get 15% off, children (under 12) 20%, everyone else nothing."""
    if age is None:
        return 0.0
    if age >= SENIOR_AGE:
        return SENIOR_DISCOUNT_RATE
    if age < CHILD_AGE_LIMIT:
        return CHILD_DISCOUNT_RATE
    return 0.0


def baggage_fee(extra_bags: int) -> float:
    """Tiered fee for the whole booking: 50, then 75, then 100 for each further bag."""
    if extra_bags <= 0:
        return 0.0
    if extra_bags == 1:
        return FIRST_BAG_FEE
    return FIRST_BAG_FEE + SECOND_BAG_FEE + (extra_bags - 2) * ADDITIONAL_BAG_FEE


def meal_fee(selection: str | None) -> float:
    if not selection:
        return 0.0
    return MEAL_FEES.get(selection, 0.0)


def round_currency(amount: float) -> float:
    if not math.isfinite(amount):
        raise PricingError("Price could not be computed.")
    with localcontext() as ctx:
        ctx.prec = _ROUNDING_PRECISION
        return float(Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP))


def _check_input(details: PricingInput) -> None:
    if details.base_fare <= 0 or details.number_of_passengers <= 0:
        raise PricingError("Base fare and number of passengers must be positive.")
    if details.extra_bags < 0:
        raise PricingError("Extra bags cannot be negative.")
    if details.passenger_age is not None and details.passenger_age < 0:
        raise PricingError("Passenger age must be a non-negative integer if provided.")


def calculate_final_price(
    details: PricingInput,
    log: logging.Logger | None = None,
) -> float:
    """Compute the final booking price, rounded to cents and never negative.

    Steps: base fare x passengers, class multiplier, insurance, tax, age
    discount, baggage fee, meal fee, discount code, floor at zero, rounding.

    Raises PricingError when the input breaks a pricing invariant.
    """
    log = log or logger
    _check_input(details)

    passengers = details.number_of_passengers
    price = details.base_fare * passengers
    price *= CLASS_MULTIPLIERS[details.travel_class]

    if details.has_insurance:
        price += INSURANCE_COST_PER_PASSENGER * passengers

    price += price * tax_rate(details.flight_type)

    rate = age_discount_rate(details.passenger_age)
    if rate:
        amount = price * rate
        price -= amount
        log.debug("Age discount applied (age=%s): -%.2f", details.passenger_age, amount)

    price += baggage_fee(details.extra_bags)
    price += meal_fee(details.meal_selection) * passengers

    rule = match_discount(details.discount_code, passengers)
    if rule is not None:
        amount = rule.amount(price)
        price -= amount
        log.debug("Discount %s applied: -%.2f", rule.name, amount)
    elif details.discount_code:
        log.debug("No discount rule matches code %r", details.discount_code)

    if price < 0:
        log.warning("Calculated price became negative (%s), capping at 0", price)
        price = 0.0

    return round_currency(price)
