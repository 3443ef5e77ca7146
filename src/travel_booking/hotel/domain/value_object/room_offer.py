from dataclasses import dataclass

from travel_booking.shared.domain import Money


@dataclass(frozen=True)
class RoomOffer:
    """検索で見つかった客室（未予約）

    hotel はファクトリが具象予約クラスを選ぶためのブランド名。
    """

    hotel: str
    check_in: str
    check_out: str
    view_type: str
    units_available: int
    price_per_night: Money

    def __str__(self) -> str:
        return (
            f"Hotel: {self.hotel} - {self.view_type} ({self.units_available} left)"
            f" - Price: {self.price_per_night}"
            f" - Check-in: {self.check_in} - Check-out: {self.check_out}"
        )
