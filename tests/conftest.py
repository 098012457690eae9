from datetime import date, timedelta

import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DELUXE_MEAL_SELECTABLE", "false")


@pytest.fixture
async def client(mock_env):
    from flightfare.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
def departure_date() -> str:
    return (date.today() + timedelta(days=30)).isoformat()


@pytest.fixture
def booking_payload(departure_date):
    """A booking request that passes every validation rule."""
    return {
        "origin": "NYC",
        "destination": "LAX",
        "departureDate": departure_date,
        "passengers": 2,
        "selectedFlight": {
            "id": "FL001",
            "price": 200,
            "type": "Domestic",
            "airline": "TestAir",
            "flightNumber": "TA123",
            "origin": "NYC",
            "destination": "LAX",
            "departureDate": departure_date,
            "departureTime": "10:00",
        },
        "extraBags": 1,
        "mealSelection": "premium",
        "discountCode": "FLY2025",
        "dateOfBirth": "1985-05-15",
    }
