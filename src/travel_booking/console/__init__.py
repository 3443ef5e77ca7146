from .terminal import RichTerminal as RichTerminal
from .terminal import Terminal as Terminal
from .travel_agency import TravelAgency as TravelAgency
from .travel_agency import build_travel_agency as build_travel_agency
