from __future__ import annotations

from abc import ABC, abstractmethod

from travel_booking.shared.domain.value_object import Money


class Reservation(ABC):
    """予約の共通インターフェース

    - 単体の予約（フライト・ホテル）と旅程（複数予約の集合）が共に実装する
    - 料金計算・明細表示・複製を多態的に扱えるようにする
    """

    @abstractmethod
    def cost(self) -> Money:
        """予約の合計金額"""
        raise NotImplementedError

    @abstractmethod
    def describe(self) -> str:
        """予約明細を人が読める文字列で返す"""
        raise NotImplementedError

    @abstractmethod
    def clone(self) -> Reservation:
        """内部状態を共有しない複製を返す"""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.describe()
