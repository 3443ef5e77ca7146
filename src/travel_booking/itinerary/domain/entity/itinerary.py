from __future__ import annotations

from collections.abc import Iterator
from functools import reduce

from travel_booking.shared.domain import Currency, Money, Reservation


class Itinerary(Reservation):
    """旅程（複数の予約をまとめた複合予約）

    - 追加された予約は複製して保持する（呼び出し元の予約とは独立）
    - 自身も Reservation なので入れ子・複製が可能
    - 表示順は追加順
    """

    def __init__(self, currency: Currency | None = None) -> None:
        self._currency = currency or Currency.default()
        self._reservations: list[Reservation] = []

    @property
    def reservations(self) -> tuple[Reservation, ...]:
        return tuple(self._reservations)

    def __len__(self) -> int:
        return len(self._reservations)

    def __iter__(self) -> Iterator[Reservation]:
        return iter(self.reservations)

    def add(self, reservation: Reservation) -> None:
        """予約の複製を末尾に追加する"""
        self._reservations.append(reservation.clone())

    def clear(self) -> None:
        self._reservations.clear()

    def is_empty(self) -> bool:
        return not self._reservations

    def cost(self) -> Money:
        """子予約の金額の合計（子予約の通貨のまま合算する）

        空の旅程は旅程の通貨で 0 とする。
        """
        costs = [reservation.cost() for reservation in self._reservations]
        if not costs:
            return Money.zero(self._currency)
        return reduce(Money.add, costs)

    def describe(self) -> str:
        lines = [f"Itinerary of {len(self._reservations)} sub-reservations:"]
        lines.extend(reservation.describe() for reservation in self._reservations)
        lines.append("")
        lines.append(f"Itinerary Cost: {self.cost()}")
        lines.append("-" * 34)
        return "\n".join(lines)

    def clone(self) -> Itinerary:
        duplicate = Itinerary(self._currency)
        for reservation in self._reservations:
            duplicate.add(reservation)
        return duplicate
