from dataclasses import dataclass
from decimal import Decimal


@dataclass
class TurkishCustomerInfo:
    """Turkish Airlines API の搭乗者レコード"""

    from_city: str
    to_city: str
    datetime_from: str
    datetime_to: str
    adults: int
    children: int
    infants: int


@dataclass
class TurkishFlight:
    """Turkish Airlines API のフライトレコード"""

    cost: Decimal
    datetime_from: str
    datetime_to: str


class TurkishAirlineOnlineAPI:
    """Turkish Airlines のオンライン予約 API（スタブ）"""

    def set_from_to_info(self, info: TurkishCustomerInfo) -> None:
        pass

    def set_passenger_info(self, info: TurkishCustomerInfo) -> None:
        pass

    def get_available_flights(self) -> list[TurkishFlight]:
        return [
            TurkishFlight(Decimal("200"), "25-01-2022", "10-02-2022"),
            TurkishFlight(Decimal("250"), "29-01-2022", "10-02-2022"),
        ]

    def reserve_flight(self, info: TurkishCustomerInfo, flight: TurkishFlight) -> bool:
        return True

    def cancel_reserved_flight(
        self, info: TurkishCustomerInfo, flight: TurkishFlight
    ) -> bool:
        return False
