from .entity import Itinerary as Itinerary
from .factory import ReservationFactory as ReservationFactory
