from __future__ import annotations

from dataclasses import replace

from travel_booking.hotel.domain import (
    HotelBookingRequest,
    HotelBrand,
    HotelReservation,
    RoomOffer,
)
from travel_booking.hotel.infrastructure.marriott_api import (
    MarriottCustomerInfo,
    MarriottFoundRoom,
    MarriottHotelAPI,
)
from travel_booking.shared.domain import (
    Currency,
    IncompleteReservationException,
    Money,
)
from travel_booking.shared.utils import get_logger

logger = get_logger("hotel")


class MarriottHotelReservation(HotelReservation):
    """Marriott 向けのホテル予約アダプタ"""

    def __init__(
        self,
        request: HotelBookingRequest | None = None,
        offer: RoomOffer | None = None,
        api: MarriottHotelAPI | None = None,
    ) -> None:
        self._api = api or MarriottHotelAPI()
        self._customer: MarriottCustomerInfo | None = None
        self._room: MarriottFoundRoom | None = None
        self._currency = Currency.default()

        if request is not None:
            self.set_customer_info(request)
        if offer is not None:
            self.set_chosen_offer(offer)

    @property
    def customer(self) -> MarriottCustomerInfo | None:
        return self._customer

    @property
    def chosen_room(self) -> MarriottFoundRoom | None:
        return self._room

    def set_customer_info(self, request: HotelBookingRequest) -> None:
        if request is None:
            raise IncompleteReservationException("Customer info cannot be None")
        self._customer = MarriottCustomerInfo(
            country=request.country,
            city=request.city,
            date_from=request.check_in,
            date_to=request.check_out,
            needed_rooms=request.rooms_needed,
            adults=request.adults,
            children=request.children,
            number_of_nights=request.nights,
        )

    def set_chosen_offer(self, offer: RoomOffer) -> None:
        if offer is None:
            raise IncompleteReservationException("Chosen room cannot be None")
        self._room = MarriottFoundRoom(
            room_type=offer.view_type,
            available_number=offer.units_available,
            price_per_night=offer.price_per_night.amount,
            date_from=offer.check_in,
            date_to=offer.check_out,
        )
        self._currency = offer.price_per_night.currency

    def search(self) -> list[RoomOffer]:
        customer = self._require(self._customer, "Customer info")
        self._api.set_customer_info(customer)
        offers = [
            RoomOffer(
                hotel=HotelBrand.MARRIOTT.value,
                check_in=room.date_from,
                check_out=room.date_to,
                view_type=room.room_type,
                units_available=room.available_number,
                price_per_night=Money(room.price_per_night, self._currency),
            )
            for room in self._api.find_rooms(customer)
        ]
        logger.info("Marriott search finished", extra={"offers": len(offers)})
        return offers

    def cost(self) -> Money:
        customer = self._require(self._customer, "Customer info")
        room = self._require(self._room, "Chosen room")
        return (
            Money(room.price_per_night, self._currency)
            .multiply(customer.number_of_nights)
            .multiply(customer.needed_rooms)
        )

    def describe(self) -> str:
        customer = self._require(self._customer, "Customer info")
        return (
            f"Hotel Reservation / Marriott Hotel: {customer.country} @ {customer.city}"
            f"  from {customer.date_from}  to {customer.date_to}"
            f" ({customer.number_of_nights} nights)\n"
            f"\t\tAdults: {customer.adults}\n"
            f"\t\tChildren: {customer.children}\n"
            f"\t\tRooms: {customer.needed_rooms}\n"
            f"\t\tRoom Cost For All Nights: {self.cost()}"
        )

    def clone(self) -> MarriottHotelReservation:
        duplicate = MarriottHotelReservation(api=self._api)
        duplicate._customer = replace(self._customer) if self._customer else None
        duplicate._room = replace(self._room) if self._room else None
        duplicate._currency = self._currency
        return duplicate

    def commit(self) -> bool:
        customer = self._require(self._customer, "Customer info")
        room = self._require(self._room, "Chosen room")
        reserved = self._api.reserve_room(room, customer)
        if not reserved:
            logger.warning("Marriott declined the reservation")
        return reserved

    def cancel(self) -> bool:
        customer = self._require(self._customer, "Customer info")
        room = self._require(self._room, "Chosen room")
        cancelled = self._api.cancel_reservation(room, customer)
        if not cancelled:
            logger.warning("Marriott declined the cancellation")
        return cancelled
