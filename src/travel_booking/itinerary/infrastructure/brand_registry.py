from travel_booking.flight.domain import AirlineBrand
from travel_booking.flight.infrastructure import (
    CanadaFlightReservation,
    TurkishFlightReservation,
)
from travel_booking.hotel.domain import HotelBrand
from travel_booking.hotel.infrastructure import (
    HiltonHotelReservation,
    MarriottHotelReservation,
)
from travel_booking.itinerary.domain import ReservationFactory

FLIGHT_RESERVATIONS = {
    AirlineBrand.CANADA: CanadaFlightReservation,
    AirlineBrand.TURKISH: TurkishFlightReservation,
}

HOTEL_RESERVATIONS = {
    HotelBrand.HILTON: HiltonHotelReservation,
    HotelBrand.MARRIOTT: MarriottHotelReservation,
}


def build_reservation_factory() -> ReservationFactory:
    """提携ブランドをすべて登録したファクトリを生成する"""
    return ReservationFactory(
        flight_types=FLIGHT_RESERVATIONS,
        hotel_types=HOTEL_RESERVATIONS,
    )
