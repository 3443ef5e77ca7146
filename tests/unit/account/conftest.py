import pytest

from travel_booking.account.domain import User
from travel_booking.flight.infrastructure import CanadaFlightReservation
from travel_booking.itinerary.domain import Itinerary


@pytest.fixture
def create_user():
    """User を生成する Factory fixture"""

    def _factory(
        username: str = "mostafa",
        password: str = "secret",
        email: str = "mostafa@example.com",
    ) -> User:
        return User(username=username, password=password, email=email)

    return _factory


@pytest.fixture
def itinerary(create_flight_request, create_flight_offer):
    """600 USD のフライトを1件含む旅程"""
    itinerary = Itinerary()
    itinerary.add(
        CanadaFlightReservation(
            request=create_flight_request(), offer=create_flight_offer()
        )
    )
    return itinerary
