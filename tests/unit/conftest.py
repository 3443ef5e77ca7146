import pytest

from travel_booking.flight.domain import FlightBookingRequest, FlightOffer
from travel_booking.hotel.domain import HotelBookingRequest, RoomOffer
from travel_booking.payment.domain import TransactionRequest
from travel_booking.shared.domain import Money


@pytest.fixture
def create_flight_request():
    """FlightBookingRequest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        adults: int = 2,
        children: int = 1,
        infants: int = 0,
        origin_city: str = "Cairo",
        destination_city: str = "Istanbul",
    ) -> FlightBookingRequest:
        return FlightBookingRequest(
            origin_city=origin_city,
            destination_city=destination_city,
            depart_date="25-01-2022",
            return_date="10-02-2022",
            adults=adults,
            children=children,
            infants=infants,
        )

    return _factory


@pytest.fixture
def create_flight_offer():
    """FlightOffer を生成する Factory fixture"""

    def _factory(
        carrier: str = "Canada",
        price: str = "200",
    ) -> FlightOffer:
        return FlightOffer(
            carrier=carrier,
            price_per_passenger=Money.usd(price),
            depart_date="25-01-2022",
            return_date="10-02-2022",
        )

    return _factory


@pytest.fixture
def create_hotel_request():
    """HotelBookingRequest を生成する Factory fixture"""

    def _factory(
        nights: int = 5,
        rooms_needed: int = 2,
        adults: int = 2,
        children: int = 1,
    ) -> HotelBookingRequest:
        return HotelBookingRequest(
            country="Turkey",
            city="Istanbul",
            check_in="29-01-2022",
            check_out="10-02-2022",
            adults=adults,
            children=children,
            rooms_needed=rooms_needed,
            nights=nights,
        )

    return _factory


@pytest.fixture
def create_room_offer():
    """RoomOffer を生成する Factory fixture"""

    def _factory(
        hotel: str = "Hilton",
        price: str = "300",
        view_type: str = "City View",
    ) -> RoomOffer:
        return RoomOffer(
            hotel=hotel,
            check_in="29-01-2022",
            check_out="10-02-2022",
            view_type=view_type,
            units_available=3,
            price_per_night=Money.usd(price),
        )

    return _factory


@pytest.fixture
def create_transaction():
    """TransactionRequest を生成する Factory fixture"""

    def _factory(
        method: str = "paypal",
        amount: str = "600",
    ) -> TransactionRequest:
        return TransactionRequest(
            method=method,
            cardholder_name="Mostafa",
            address="Cairo",
            card_id="4111-1111",
            expiry="12-2026",
            cvv="123",
            amount=Money.usd(amount),
        )

    return _factory
