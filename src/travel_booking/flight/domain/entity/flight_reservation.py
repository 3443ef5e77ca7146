from __future__ import annotations

from abc import abstractmethod
from typing import TypeVar

from travel_booking.flight.domain.value_object import FlightBookingRequest, FlightOffer
from travel_booking.shared.domain import IncompleteReservationException, Reservation

R = TypeVar("R")


class FlightReservation(Reservation):
    """フライト予約の基底クラス

    航空会社ごとのアダプタが、共通の検索条件・オファーを
    各社 API 固有のレコードに変換して保持する。
    """

    @abstractmethod
    def set_customer_info(self, request: FlightBookingRequest) -> None:
        """検索条件から搭乗者情報を設定する"""
        raise NotImplementedError

    @abstractmethod
    def set_chosen_offer(self, offer: FlightOffer) -> None:
        """選択されたフライトを設定する"""
        raise NotImplementedError

    @abstractmethod
    def search(self) -> list[FlightOffer]:
        """空席のあるフライトを検索し、ブランド名を付けて返す"""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> bool:
        """航空会社 API で予約を確定する"""
        raise NotImplementedError

    @abstractmethod
    def cancel(self) -> bool:
        """航空会社 API で予約を取り消す"""
        raise NotImplementedError

    @staticmethod
    def _require(record: R | None, name: str) -> R:
        if record is None:
            raise IncompleteReservationException(f"{name} has not been set")
        return record
