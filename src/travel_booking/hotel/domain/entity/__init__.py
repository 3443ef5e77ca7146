from .hotel_reservation import HotelReservation as HotelReservation
