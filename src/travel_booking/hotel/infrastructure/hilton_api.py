from dataclasses import dataclass
from decimal import Decimal


@dataclass
class HiltonCustomerInfo:
    """Hilton API の宿泊者レコード"""

    country: str
    city: str
    date_from: str
    date_to: str
    needed_rooms: int
    adults: int
    children: int
    number_of_nights: int


@dataclass
class HiltonRoom:
    """Hilton API の客室レコード"""

    room_type: str
    available_number: int
    price_per_night: Decimal
    from_date: str
    to_date: str


class HiltonHotelAPI:
    """Hilton の予約 API（スタブ）"""

    def search_rooms(self, customer_info: HiltonCustomerInfo) -> list[HiltonRoom]:
        return [
            HiltonRoom("Interior View", 6, Decimal("200"), "29-01-2022", "10-02-2022"),
            HiltonRoom("City View", 3, Decimal("300"), "29-01-2022", "10-02-2022"),
            HiltonRoom("Deluxe View", 8, Decimal("500"), "29-01-2022", "10-02-2022"),
        ]

    def reserve_room(
        self, customer_info: HiltonCustomerInfo, room_info: HiltonRoom
    ) -> bool:
        return True

    def cancel_reservation(
        self, customer_info: HiltonCustomerInfo, room_info: HiltonRoom
    ) -> bool:
        return True
