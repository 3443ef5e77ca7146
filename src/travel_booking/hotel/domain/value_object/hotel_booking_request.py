from dataclasses import dataclass


@dataclass(frozen=True)
class HotelBookingRequest:
    """ホテルチェーンに依存しない宿泊検索条件"""

    country: str
    city: str
    check_in: str
    check_out: str
    adults: int
    children: int = 0
    rooms_needed: int = 1
    nights: int = 1

    def __post_init__(self) -> None:
        if min(self.adults, self.children) < 0:
            raise ValueError("Guest counts cannot be negative")
        if self.rooms_needed < 0:
            raise ValueError("Rooms needed cannot be negative")
        if self.nights < 0:
            raise ValueError("Nights cannot be negative")
