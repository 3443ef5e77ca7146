from .itinerary_builder import ItineraryBuilder as ItineraryBuilder
from .make_reservation import MakeReservationService as MakeReservationService
from .make_reservation import OfferSelector as OfferSelector
