"""Discount code rules, evaluated in priority order.

The first rule whose predicate matches the normalized code wins; at most one
discount is ever applied to a booking.
"""

from collections.abc import Callable
from dataclasses import dataclass

FLY2025_RATE = 0.10
FLY2025_MAX_DISCOUNT = 50.0
FLY2025_LOW_TOTAL = 100.0  # below this total the discount is the flat cap
FLAT_DISCOUNT_AMOUNT = 20.0
PROMO_DISCOUNT_AMOUNT = 10.0
PROMO_MIN_LENGTH = 10  # exclusive

_FLAT_CODES = {"SUMMER20", "SAVE20"}


@dataclass(frozen=True)
class DiscountRule:
    name: str
    applies: Callable[[str, int], bool]  # (normalized code, passengers)
    amount: Callable[[float], float]  # current price -> discount amount


def _fly2025_amount(price: float) -> float:
    amount = price * FLY2025_RATE
    if amount > FLY2025_MAX_DISCOUNT or price < FLY2025_LOW_TOTAL:
        return FLY2025_MAX_DISCOUNT
    return amount


DISCOUNT_RULES: tuple[DiscountRule, ...] = (
    DiscountRule(
        name="FLY2025",
        applies=lambda code, passengers: code == "FLY2025" and passengers >= 1,
        amount=_fly2025_amount,
    ),
    DiscountRule(
        name="FLAT20",
        applies=lambda code, _passengers: code in _FLAT_CODES,
        amount=lambda _price: FLAT_DISCOUNT_AMOUNT,
    ),
    DiscountRule(
        name="PROMO",
        applies=lambda code, _passengers: len(code) > PROMO_MIN_LENGTH and "PROMO" in code,
        amount=lambda _price: PROMO_DISCOUNT_AMOUNT,
    ),
)


def normalize_code(code: str | None) -> str:
    if not code or not isinstance(code, str):
        return ""
    return code.strip().upper()


def match_discount(
    code: str | None,
    passengers: int,
    rules: tuple[DiscountRule, ...] = DISCOUNT_RULES,
) -> DiscountRule | None:
    """Return the first rule matching ``code``, or None."""
    normalized = normalize_code(code)
    if not normalized:
        return None
    for rule in rules:
        if rule.applies(normalized, passengers):
            return rule
    return None
