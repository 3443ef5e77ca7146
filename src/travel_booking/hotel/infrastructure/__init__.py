from .hilton_hotel_reservation import (
    HiltonHotelReservation as HiltonHotelReservation,
)
from .marriott_hotel_reservation import (
    MarriottHotelReservation as MarriottHotelReservation,
)
