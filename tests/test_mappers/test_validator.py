"""Tests for the booking request validation gate."""

from datetime import date

import pytest

from flightfare.mappers.validator import parse_calendar_date, validate_booking_request
from flightfare.schemas.booking import selectable_meals

TODAY = date(2026, 10, 18)

MISSING_FLIGHT = "No flight selected for booking or selected flight details are incomplete."
INVALID_PRICE = "Selected flight has an invalid price. Price must be a positive number."
INVALID_TYPE = 'Selected flight has an invalid type. Must be "Domestic" or "International".'


def _payload(**overrides):
    data = {
        "origin": "NYC",
        "destination": "LAX",
        "departureDate": "2026-12-01",
        "passengers": 1,
        "selectedFlight": {"id": "FL001", "price": 200, "type": "Domestic"},
        "extraBags": 0,
        "mealSelection": "none",
        "dateOfBirth": "1990-01-01",
    }
    data.update(overrides)
    return data


def _validate(payload, **kwargs):
    return validate_booking_request(payload, today=TODAY, **kwargs)


def test_valid_request_has_no_errors():
    assert _validate(_payload()) == []


def test_minimal_valid_request():
    payload = _payload()
    for key in ("extraBags", "mealSelection", "dateOfBirth"):
        payload.pop(key)
    assert _validate(payload) == []


def test_errors_accumulate_for_empty_request():
    errors = _validate({})
    assert errors == [
        "Invalid or missing origin. Origin must be a non-empty string.",
        "Invalid or missing destination. Destination must be a non-empty string.",
        "Invalid or missing departure date format. Expected YYYY-MM-DD.",
        "Number of passengers must be a positive integer.",
        MISSING_FLIGHT,
    ]


def test_every_broken_rule_is_reported():
    payload = _payload(
        passengers=-5,
        extraBags=-2,
        mealSelection="gourmet_gold",
        discountCode="'; DROP TABLE users; --",
        dateOfBirth="2030-01-01",
    )
    assert len(_validate(payload)) == 5


# --- origin / destination ---


@pytest.mark.parametrize("value", [None, "", "   ", 123, ["NYC"]])
def test_invalid_origin(value):
    assert "Invalid or missing origin. Origin must be a non-empty string." in _validate(
        _payload(origin=value)
    )


def test_invalid_destination():
    errors = _validate(_payload(destination="  "))
    assert errors == ["Invalid or missing destination. Destination must be a non-empty string."]


# --- dates ---


@pytest.mark.parametrize("value", [None, "", "12/01/2026", "2026-1-01", "2026-13-45", 20261201])
def test_invalid_departure_format(value):
    errors = _validate(_payload(departureDate=value))
    assert errors == ["Invalid or missing departure date format. Expected YYYY-MM-DD."]


def test_departure_in_the_past():
    assert _validate(_payload(departureDate="2026-10-17")) == ["Departure date cannot be in the past."]


def test_departure_today_is_allowed():
    assert _validate(_payload(departureDate="2026-10-18")) == []


def test_return_before_departure():
    errors = _validate(_payload(departureDate="2026-12-05", returnDate="2026-12-01"))
    assert errors == ["Return date cannot be before departure date."]


def test_return_same_day_is_allowed():
    assert _validate(_payload(departureDate="2026-12-05", returnDate="2026-12-05")) == []


def test_invalid_return_format():
    errors = _validate(_payload(returnDate="next week"))
    assert errors == ["Invalid return date format. Expected YYYY-MM-DD."]


def test_return_not_compared_with_invalid_departure():
    errors = _validate(_payload(departureDate="soon", returnDate="2026-01-01"))
    assert errors == ["Invalid or missing departure date format. Expected YYYY-MM-DD."]


def test_date_of_birth_in_future():
    assert _validate(_payload(dateOfBirth="2026-10-19")) == ["Date of Birth cannot be in the future."]


def test_date_of_birth_today_is_allowed():
    assert _validate(_payload(dateOfBirth="2026-10-18")) == []


def test_invalid_date_of_birth_format():
    errors = _validate(_payload(dateOfBirth="01-01-1990"))
    assert errors == ["Invalid date of birth format. Expected YYYY-MM-DD."]


def test_parse_calendar_date():
    assert parse_calendar_date("2026-02-28") == date(2026, 2, 28)
    assert parse_calendar_date("2026-02-30") is None
    assert parse_calendar_date("2026-02-28T10:00") is None
    assert parse_calendar_date(None) is None


# --- passengers ---


@pytest.mark.parametrize("value", [-5, 0, 2.5, "2", True, None, float("nan")])
def test_invalid_passengers(value):
    assert _validate(_payload(passengers=value)) == ["Number of passengers must be a positive integer."]


def test_integral_float_passengers_accepted():
    assert _validate(_payload(passengers=2.0)) == []


# --- selected flight ---


@pytest.mark.parametrize("flight", [None, "FL001", [], {}, {"id": ""}, {"price": 200, "type": "Domestic"}])
def test_missing_flight_reports_only_one_error(flight):
    errors = _validate(_payload(selectedFlight=flight))
    assert errors == [MISSING_FLIGHT]


def test_absent_flight_reports_only_one_error():
    payload = _payload()
    del payload["selectedFlight"]
    assert _validate(payload) == [MISSING_FLIGHT]


@pytest.mark.parametrize("price", [0, -100, "200", None, True, float("inf")])
def test_invalid_flight_price(price):
    flight = {"id": "FL002", "price": price, "type": "International"}
    assert _validate(_payload(selectedFlight=flight)) == [INVALID_PRICE]


@pytest.mark.parametrize("flight_type", ["unknown", "domestic", "", None, 1])
def test_invalid_flight_type(flight_type):
    flight = {"id": "FL003", "price": 300, "type": flight_type}
    assert _validate(_payload(selectedFlight=flight)) == [INVALID_TYPE]


def test_flight_price_and_type_both_reported():
    flight = {"id": "FL003", "price": 0, "type": "Charter"}
    assert _validate(_payload(selectedFlight=flight)) == [INVALID_PRICE, INVALID_TYPE]


def test_numeric_flight_id_accepted():
    flight = {"id": 42, "price": 99.5, "type": "International"}
    assert _validate(_payload(selectedFlight=flight)) == []


# --- extras ---


@pytest.mark.parametrize("bags", [-2, 1.5, "1", None, False])
def test_invalid_extra_bags(bags):
    assert _validate(_payload(extraBags=bags)) == ["Extra bags must be a non-negative integer."]


def test_invalid_meal_selection_message():
    errors = _validate(_payload(mealSelection="gourmet_gold"))
    assert errors == ['Invalid meal selection: "gourmet_gold". Valid options are none, standard, premium.']


def test_deluxe_meal_rejected_by_default():
    errors = _validate(_payload(mealSelection="deluxe"))
    assert errors == ['Invalid meal selection: "deluxe". Valid options are none, standard, premium.']


def test_deluxe_meal_accepted_when_selectable():
    meals = selectable_meals(include_deluxe=True)
    assert _validate(_payload(mealSelection="deluxe"), meal_options=meals) == []


def test_empty_meal_selection_is_allowed():
    assert _validate(_payload(mealSelection="")) == []
    assert _validate(_payload(mealSelection=None)) == []


@pytest.mark.parametrize(
    "code",
    ["'; DROP TABLE users; --", "FLY 2025", "FLY2025\n", "<script>", "SAVE_20", 2025],
)
def test_invalid_discount_code(code):
    errors = _validate(_payload(discountCode=code))
    assert errors == [
        "Invalid discount code format. Only alphanumeric characters and hyphens are allowed."
    ]


@pytest.mark.parametrize("code", ["FLY2025", "fly-2025", "SPRINGPROMO1", "", None])
def test_valid_discount_code(code):
    assert _validate(_payload(discountCode=code)) == []


def test_invalid_travel_class():
    errors = _validate(_payload(travelClass="premium-economy"))
    assert errors == [
        'Invalid travel class: "premium-economy". Valid options are economy, business, first.'
    ]


@pytest.mark.parametrize("travel_class", ["economy", "business", "first"])
def test_valid_travel_class(travel_class):
    assert _validate(_payload(travelClass=travel_class)) == []


@pytest.mark.parametrize("insurance", ["yes", 1, 0, "true"])
def test_invalid_insurance_flag(insurance):
    assert _validate(_payload(hasInsurance=insurance)) == ["Insurance selection must be a boolean."]


def test_boolean_insurance_flag_accepted():
    assert _validate(_payload(hasInsurance=True)) == []
    assert _validate(_payload(hasInsurance=False)) == []
