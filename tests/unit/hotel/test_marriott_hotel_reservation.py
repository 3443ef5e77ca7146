from decimal import Decimal
from unittest.mock import MagicMock

from travel_booking.hotel.infrastructure import MarriottHotelReservation
from travel_booking.shared.domain import Money


class TestMarriottHotelReservation:
    """MarriottHotelReservation のテスト"""

    def test_cost_is_price_times_nights_times_rooms(
        self, create_hotel_request, create_room_offer
    ):
        reservation = MarriottHotelReservation(
            request=create_hotel_request(nights=3, rooms_needed=1),
            offer=create_room_offer(hotel="Marriott", price="220"),
        )

        assert reservation.cost() == Money.usd("660")

    def test_search_returns_marriott_rooms(self, create_hotel_request):
        reservation = MarriottHotelReservation()
        reservation.set_customer_info(create_hotel_request())

        offers = reservation.search()

        assert [offer.price_per_night for offer in offers] == [
            Money.usd("320"),
            Money.usd("220"),
            Money.usd("600"),
        ]
        assert all(offer.hotel == "Marriott" for offer in offers)

    def test_clone_is_independent_of_original(
        self, create_hotel_request, create_room_offer
    ):
        original = MarriottHotelReservation(
            request=create_hotel_request(),
            offer=create_room_offer(hotel="Marriott"),
        )

        duplicate = original.clone()
        duplicate.customer.needed_rooms = 7
        duplicate.chosen_room.price_per_night = Decimal("1")

        assert original.cost() == Money.usd("3000")

    def test_cancel_passes_room_first(self, create_hotel_request, create_room_offer):
        # Arrange
        mock_api = MagicMock()
        mock_api.cancel_reservation.return_value = True
        reservation = MarriottHotelReservation(
            request=create_hotel_request(),
            offer=create_room_offer(hotel="Marriott", view_type="Private View"),
            api=mock_api,
        )

        # Act
        result = reservation.cancel()

        # Assert
        assert result is True
        room, customer = mock_api.cancel_reservation.call_args[0]
        assert room.room_type == "Private View"
        assert customer.city == "Istanbul"
