from .entity import FlightReservation as FlightReservation
from .enum import AirlineBrand as AirlineBrand
from .value_object import FlightBookingRequest as FlightBookingRequest
from .value_object import FlightOffer as FlightOffer
