from .flight_booking_request import FlightBookingRequest as FlightBookingRequest
from .flight_offer import FlightOffer as FlightOffer
