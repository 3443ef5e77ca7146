from dataclasses import dataclass


@dataclass(frozen=True)
class FlightBookingRequest:
    """航空会社に依存しないフライト検索条件

    検索に渡した後は変更されない。
    """

    origin_city: str
    destination_city: str
    depart_date: str
    return_date: str
    adults: int
    children: int = 0
    infants: int = 0

    def __post_init__(self) -> None:
        if min(self.adults, self.children, self.infants) < 0:
            raise ValueError("Passenger counts cannot be negative")
