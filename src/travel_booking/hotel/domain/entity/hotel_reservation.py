from __future__ import annotations

from abc import abstractmethod
from typing import TypeVar

from travel_booking.hotel.domain.value_object import HotelBookingRequest, RoomOffer
from travel_booking.shared.domain import IncompleteReservationException, Reservation

R = TypeVar("R")


class HotelReservation(Reservation):
    """ホテル予約の基底クラス"""

    @abstractmethod
    def set_customer_info(self, request: HotelBookingRequest) -> None:
        """検索条件から宿泊者情報を設定する"""
        raise NotImplementedError

    @abstractmethod
    def set_chosen_offer(self, offer: RoomOffer) -> None:
        """選択された客室を設定する"""
        raise NotImplementedError

    @abstractmethod
    def search(self) -> list[RoomOffer]:
        """空室を検索し、ブランド名を付けて返す"""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> bool:
        """ホテル API で予約を確定する"""
        raise NotImplementedError

    @abstractmethod
    def cancel(self) -> bool:
        """ホテル API で予約を取り消す"""
        raise NotImplementedError

    @staticmethod
    def _require(record: R | None, name: str) -> R:
        if record is None:
            raise IncompleteReservationException(f"{name} has not been set")
        return record
