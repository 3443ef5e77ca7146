from travel_booking.itinerary.applications import ItineraryBuilder, MakeReservationService
from travel_booking.itinerary.domain import Itinerary
from travel_booking.itinerary.infrastructure import build_reservation_factory
from travel_booking.shared.domain import Money


def _builder(itinerary=None):
    return ItineraryBuilder(
        MakeReservationService(build_reservation_factory()), itinerary
    )


class TestItineraryBuilder:
    """ItineraryBuilder のテスト"""

    def test_add_flight_and_hotel(self, create_flight_request, create_hotel_request):
        """フライト 600 + ホテル（Hilton City View 300 × 5泊 × 2室）3000 = 3600"""

        # Arrange
        builder = _builder()

        # Act
        added_flight = builder.add_flight(create_flight_request(), lambda offers: 1)
        added_hotel = builder.add_hotel(create_hotel_request(), lambda offers: 2)

        # Assert
        assert added_flight is True
        assert added_hotel is True
        assert builder.itinerary.cost() == Money.usd("3600")
        assert builder.check_itinerary() is False

    def test_aborted_selection_adds_nothing(self, create_flight_request):
        builder = _builder()

        added = builder.add_flight(create_flight_request(), lambda offers: -1)

        assert added is False
        assert builder.check_itinerary() is True

    def test_clear_itinerary(self, create_flight_request):
        builder = _builder()
        builder.add_flight(create_flight_request(), lambda offers: 1)

        builder.clear_itinerary()

        assert builder.check_itinerary() is True

    def test_uses_given_empty_itinerary(self):
        itinerary = Itinerary()

        builder = _builder(itinerary)

        assert builder.itinerary is itinerary
