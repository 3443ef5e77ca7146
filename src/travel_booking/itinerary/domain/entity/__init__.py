from .itinerary import Itinerary as Itinerary
