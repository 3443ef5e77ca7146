from unittest.mock import MagicMock

import pytest

from travel_booking.flight.infrastructure import CanadaFlightReservation
from travel_booking.hotel.infrastructure import MarriottHotelReservation
from travel_booking.itinerary.applications import MakeReservationService
from travel_booking.itinerary.infrastructure import build_reservation_factory
from travel_booking.shared.domain import Money


class TestMakeReservationService:
    """MakeReservationService のテスト"""

    def test_valid_choice_creates_reservation(self, create_flight_request):
        """1番目（Air Canada 200）を選ぶと 200 × 3人 の予約になる"""

        # Arrange
        service = MakeReservationService(build_reservation_factory())
        select = MagicMock(return_value=1)

        # Act
        reservation = service.reserve_flight(create_flight_request(), select)

        # Assert
        assert isinstance(reservation, CanadaFlightReservation)
        assert reservation.cost() == Money.usd("600")
        offers = select.call_args[0][0]
        assert len(offers) == 4

    def test_offers_are_listed_in_registration_order(self, create_flight_request):
        service = MakeReservationService(build_reservation_factory())
        select = MagicMock(return_value=4)

        reservation = service.reserve_flight(create_flight_request(), select)

        offers = select.call_args[0][0]
        assert [offer.carrier for offer in offers] == [
            "Canada",
            "Canada",
            "Turkish",
            "Turkish",
        ]
        assert reservation.cost() == Money.usd("750")

    @pytest.mark.parametrize("choice", [-1, 0, 5])
    def test_out_of_range_choice_aborts(self, create_flight_request, choice):
        service = MakeReservationService(build_reservation_factory())

        reservation = service.reserve_flight(
            create_flight_request(), lambda offers: choice
        )

        assert reservation is None

    def test_reserve_room(self, create_hotel_request):
        """4番目（Marriott City View 320）を 5泊 × 2室"""
        service = MakeReservationService(build_reservation_factory())

        reservation = service.reserve_room(create_hotel_request(), lambda offers: 4)

        assert isinstance(reservation, MarriottHotelReservation)
        assert reservation.cost() == Money.usd("3200")

    def test_unknown_brand_in_offer_returns_none(self, create_flight_request):
        # Arrange
        factory = MagicMock()
        candidate = MagicMock()
        candidate.search.return_value = [MagicMock(carrier="Unknown")]
        factory.flight_candidates.return_value = [candidate]
        factory.create.return_value = None
        service = MakeReservationService(factory)

        # Act
        reservation = service.reserve_flight(create_flight_request(), lambda offers: 1)

        # Assert
        assert reservation is None
        factory.create.assert_called_once()
