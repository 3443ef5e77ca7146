from collections.abc import Callable, Mapping

from travel_booking.flight.domain import FlightBookingRequest, FlightOffer, FlightReservation
from travel_booking.hotel.domain import HotelBookingRequest, HotelReservation, RoomOffer
from travel_booking.shared.domain import Reservation
from travel_booking.shared.utils import get_logger

logger = get_logger("itinerary")

FlightReservationType = Callable[[], FlightReservation]
HotelReservationType = Callable[[], HotelReservation]


class ReservationFactory:
    """ブランド名から具象予約を生成するファクトリ

    - ブランド名は大文字小文字を区別した完全一致で照合する
    - 未登録のブランドは None を返す（例外にはしない）
    - 検索用の候補は毎回新しいインスタンスを返す
    """

    def __init__(
        self,
        flight_types: Mapping[str, FlightReservationType],
        hotel_types: Mapping[str, HotelReservationType],
    ) -> None:
        self._flight_types = dict(flight_types)
        self._hotel_types = dict(hotel_types)

    def flight_candidates(self) -> list[FlightReservation]:
        """登録済み航空会社の予約を登録順に新規生成する"""
        return [new_reservation() for new_reservation in self._flight_types.values()]

    def hotel_candidates(self) -> list[HotelReservation]:
        """登録済みホテルチェーンの予約を登録順に新規生成する"""
        return [new_reservation() for new_reservation in self._hotel_types.values()]

    def create(
        self,
        brand: str,
        request: FlightBookingRequest | HotelBookingRequest,
        offer: FlightOffer | RoomOffer,
    ) -> Reservation | None:
        """ブランドに対応する予約を生成し、検索条件と選択オファーを引き渡す"""
        new_reservation = self._flight_types.get(brand) or self._hotel_types.get(brand)
        if new_reservation is None:
            logger.warning("No such brand", extra={"brand": brand})
            return None

        reservation = new_reservation()
        reservation.set_customer_info(request)  # type: ignore[arg-type]
        reservation.set_chosen_offer(offer)  # type: ignore[arg-type]
        return reservation
