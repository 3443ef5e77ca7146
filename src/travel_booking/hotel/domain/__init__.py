from .entity import HotelReservation as HotelReservation
from .enum import HotelBrand as HotelBrand
from .value_object import HotelBookingRequest as HotelBookingRequest
from .value_object import RoomOffer as RoomOffer
