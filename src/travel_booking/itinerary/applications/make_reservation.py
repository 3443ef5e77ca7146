from collections.abc import Callable, Sequence
from typing import TypeVar

from travel_booking.flight.domain import FlightBookingRequest, FlightOffer
from travel_booking.hotel.domain import HotelBookingRequest, RoomOffer
from travel_booking.itinerary.domain import ReservationFactory
from travel_booking.shared.domain import Reservation
from travel_booking.shared.utils import get_logger

logger = get_logger("itinerary")

O = TypeVar("O", FlightOffer, RoomOffer)

# 1 始まりの番号を返す。範囲外（キャンセル値 -1 を含む）は中止扱い
OfferSelector = Callable[[Sequence[O]], int]


class MakeReservationService:
    """予約作成サービス（検索 → 選択 → 生成）

    呼び出しごとに新しい候補で検索し、前回の検索結果は保持しない。
    """

    def __init__(self, factory: ReservationFactory) -> None:
        self._factory = factory

    def reserve_flight(
        self,
        request: FlightBookingRequest,
        select: OfferSelector[FlightOffer],
    ) -> Reservation | None:
        """全航空会社を検索し、選択されたフライトの予約を生成する"""
        offers: list[FlightOffer] = []
        for candidate in self._factory.flight_candidates():
            candidate.set_customer_info(request)
            offers.extend(candidate.search())

        offer = self._select(offers, select)
        if offer is None:
            return None
        return self._factory.create(offer.carrier, request, offer)

    def reserve_room(
        self,
        request: HotelBookingRequest,
        select: OfferSelector[RoomOffer],
    ) -> Reservation | None:
        """全ホテルチェーンを検索し、選択された客室の予約を生成する"""
        offers: list[RoomOffer] = []
        for candidate in self._factory.hotel_candidates():
            candidate.set_customer_info(request)
            offers.extend(candidate.search())

        offer = self._select(offers, select)
        if offer is None:
            return None
        return self._factory.create(offer.hotel, request, offer)

    @staticmethod
    def _select(offers: list[O], select: OfferSelector[O]) -> O | None:
        choice = select(offers)
        if not 1 <= choice <= len(offers):
            logger.info(
                "Booking aborted",
                extra={"choice": choice, "offers": len(offers)},
            )
            return None
        return offers[choice - 1]
