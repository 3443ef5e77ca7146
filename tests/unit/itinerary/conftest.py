import pytest

from travel_booking.flight.infrastructure import CanadaFlightReservation
from travel_booking.hotel.infrastructure import HiltonHotelReservation


@pytest.fixture
def flight_reservation(create_flight_request, create_flight_offer):
    """600 USD のフライト予約"""
    return CanadaFlightReservation(
        request=create_flight_request(), offer=create_flight_offer()
    )


@pytest.fixture
def hotel_reservation(create_hotel_request, create_room_offer):
    """3000 USD のホテル予約"""
    return HiltonHotelReservation(
        request=create_hotel_request(), offer=create_room_offer()
    )
