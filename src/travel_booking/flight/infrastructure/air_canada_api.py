from dataclasses import dataclass
from decimal import Decimal


@dataclass
class AirCanadaCustomerInfo:
    """Air Canada API の搭乗者レコード"""

    from_city: str
    to_city: str
    date_time_from: str
    date_time_to: str
    adults: int
    children: int
    infants: int


@dataclass
class AirCanadaFlight:
    """Air Canada API のフライトレコード"""

    price: Decimal
    date_time_from: str
    date_time_to: str


class AirCanadaOnlineAPI:
    """Air Canada のオンライン予約 API（スタブ）"""

    def set_customer_info(self, info: AirCanadaCustomerInfo) -> None:
        pass

    def get_flights(self) -> list[AirCanadaFlight]:
        return [
            AirCanadaFlight(Decimal("200"), "25-01-2022", "10-02-2022"),
            AirCanadaFlight(Decimal("250"), "29-01-2022", "10-02-2022"),
        ]

    def reserve_flight(
        self, flight: AirCanadaFlight, info: AirCanadaCustomerInfo
    ) -> bool:
        return True

    def cancel_reserve_flight(
        self, flight: AirCanadaFlight, info: AirCanadaCustomerInfo
    ) -> bool:
        # スタブはキャンセルを常に拒否する
        return False
