from .hotel_booking_request import HotelBookingRequest as HotelBookingRequest
from .room_offer import RoomOffer as RoomOffer
