from dataclasses import dataclass

from travel_booking.shared.domain import Money


@dataclass(frozen=True)
class FlightOffer:
    """検索で見つかったフライト（未予約）

    carrier はファクトリが具象予約クラスを選ぶためのブランド名。
    """

    carrier: str
    price_per_passenger: Money
    depart_date: str
    return_date: str

    def __str__(self) -> str:
        return (
            f"Airline: {self.carrier} - Price: {self.price_per_passenger}"
            f" - Departure Date: {self.depart_date}"
            f" - Arrival Date: {self.return_date}"
        )
