from travel_booking.flight.domain import FlightBookingRequest, FlightOffer
from travel_booking.hotel.domain import HotelBookingRequest, RoomOffer
from travel_booking.itinerary.applications.make_reservation import (
    MakeReservationService,
    OfferSelector,
)
from travel_booking.itinerary.domain import Itinerary


class ItineraryBuilder:
    """セッション中の旅程を組み立てる

    作業中の旅程はこのビルダーだけが所有する。
    保存時はユーザー側で複製されるため、所有権は移らない。
    """

    def __init__(
        self,
        reservations: MakeReservationService,
        itinerary: Itinerary | None = None,
    ) -> None:
        self._reservations = reservations
        # 空の旅程は偽と評価されるため None で判定する
        self._itinerary = itinerary if itinerary is not None else Itinerary()

    @property
    def itinerary(self) -> Itinerary:
        return self._itinerary

    def add_flight(
        self,
        request: FlightBookingRequest,
        select: OfferSelector[FlightOffer],
    ) -> bool:
        """フライトを予約して旅程に加える（中止時は False）"""
        reservation = self._reservations.reserve_flight(request, select)
        if reservation is None:
            return False
        self._itinerary.add(reservation)
        return True

    def add_hotel(
        self,
        request: HotelBookingRequest,
        select: OfferSelector[RoomOffer],
    ) -> bool:
        """客室を予約して旅程に加える（中止時は False）"""
        reservation = self._reservations.reserve_room(request, select)
        if reservation is None:
            return False
        self._itinerary.add(reservation)
        return True

    def check_itinerary(self) -> bool:
        """旅程が空なら True"""
        return self._itinerary.is_empty()

    def clear_itinerary(self) -> None:
        self._itinerary.clear()
