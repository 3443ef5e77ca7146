from .flight_reservation import FlightReservation as FlightReservation
