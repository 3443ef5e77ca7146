from __future__ import annotations

from dataclasses import replace

from travel_booking.hotel.domain import (
    HotelBookingRequest,
    HotelBrand,
    HotelReservation,
    RoomOffer,
)
from travel_booking.hotel.infrastructure.hilton_api import (
    HiltonCustomerInfo,
    HiltonHotelAPI,
    HiltonRoom,
)
from travel_booking.shared.domain import (
    Currency,
    IncompleteReservationException,
    Money,
)
from travel_booking.shared.utils import get_logger

logger = get_logger("hotel")


class HiltonHotelReservation(HotelReservation):
    """Hilton 向けのホテル予約アダプタ"""

    def __init__(
        self,
        request: HotelBookingRequest | None = None,
        offer: RoomOffer | None = None,
        api: HiltonHotelAPI | None = None,
    ) -> None:
        self._api = api or HiltonHotelAPI()
        self._customer: HiltonCustomerInfo | None = None
        self._room: HiltonRoom | None = None
        self._currency = Currency.default()

        if request is not None:
            self.set_customer_info(request)
        if offer is not None:
            self.set_chosen_offer(offer)

    @property
    def customer(self) -> HiltonCustomerInfo | None:
        return self._customer

    @property
    def chosen_room(self) -> HiltonRoom | None:
        return self._room

    def set_customer_info(self, request: HotelBookingRequest) -> None:
        if request is None:
            raise IncompleteReservationException("Customer info cannot be None")
        self._customer = HiltonCustomerInfo(
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
        self._room = HiltonRoom(
            room_type=offer.view_type,
            available_number=offer.units_available,
            price_per_night=offer.price_per_night.amount,
            from_date=offer.check_in,
            to_date=offer.check_out,
        )
        self._currency = offer.price_per_night.currency

    def search(self) -> list[RoomOffer]:
        customer = self._require(self._customer, "Customer info")
        offers = [
            RoomOffer(
                hotel=HotelBrand.HILTON.value,
                check_in=room.from_date,
                check_out=room.to_date,
                view_type=room.room_type,
                units_available=room.available_number,
                price_per_night=Money(room.price_per_night, self._currency),
            )
            for room in self._api.search_rooms(customer)
        ]
        logger.info("Hilton search finished", extra={"offers": len(offers)})
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
            f"Hotel Reservation / Hilton Hotel: {customer.country} @ {customer.city}"
            f"  from {customer.date_from}  to {customer.date_to}"
            f" ({customer.number_of_nights} nights)\n"
            f"\t\tAdults: {customer.adults}\n"
            f"\t\tChildren: {customer.children}\n"
            f"\t\tRooms: {customer.needed_rooms}\n"
            f"\t\tRoom Cost For All Nights: {self.cost()}"
        )

    def clone(self) -> HiltonHotelReservation:
        duplicate = HiltonHotelReservation(api=self._api)
        duplicate._customer = replace(self._customer) if self._customer else None
        duplicate._room = replace(self._room) if self._room else None
        duplicate._currency = self._currency
        return duplicate

    def commit(self) -> bool:
        customer = self._require(self._customer, "Customer info")
        room = self._require(self._room, "Chosen room")
        reserved = self._api.reserve_room(customer, room)
        if not reserved:
            logger.warning("Hilton declined the reservation")
        return reserved

    def cancel(self) -> bool:
        customer = self._require(self._customer, "Customer info")
        room = self._require(self._room, "Chosen room")
        cancelled = self._api.cancel_reservation(customer, room)
        if not cancelled:
            logger.warning("Hilton declined the cancellation")
        return cancelled
