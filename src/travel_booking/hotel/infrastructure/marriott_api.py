from dataclasses import dataclass
from decimal import Decimal


@dataclass
class MarriottCustomerInfo:
    """Marriott API の宿泊者レコード"""

    country: str
    city: str
    date_from: str
    date_to: str
    needed_rooms: int
    adults: int
    children: int
    number_of_nights: int


@dataclass
class MarriottFoundRoom:
    """Marriott API の客室レコード"""

    room_type: str
    available_number: int
    price_per_night: Decimal
    date_from: str
    date_to: str


class MarriottHotelAPI:
    """Marriott の予約 API（スタブ）"""

    def set_customer_info(self, customer_info: MarriottCustomerInfo) -> None:
        pass

    def find_rooms(self, customer_info: MarriottCustomerInfo) -> list[MarriottFoundRoom]:
        return [
            MarriottFoundRoom("City View", 8, Decimal("320"), "29-01-2022", "10-02-2022"),
            MarriottFoundRoom(
                "Interior View", 8, Decimal("220"), "29-01-2022", "10-02-2022"
            ),
            MarriottFoundRoom(
                "Private View", 5, Decimal("600"), "29-01-2022", "10-02-2022"
            ),
        ]

    def reserve_room(
        self, room_info: MarriottFoundRoom, customer_info: MarriottCustomerInfo
    ) -> bool:
        return True

    def cancel_reservation(
        self, room_info: MarriottFoundRoom, customer_info: MarriottCustomerInfo
    ) -> bool:
        return True
