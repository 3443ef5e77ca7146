from .canada_flight_reservation import (
    CanadaFlightReservation as CanadaFlightReservation,
)
from .turkish_flight_reservation import (
    TurkishFlightReservation as TurkishFlightReservation,
)
