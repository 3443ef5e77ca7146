from .exception import DomainException as DomainException
from .exception import DuplicateResourceException as DuplicateResourceException
from .exception import (
    IncompleteReservationException as IncompleteReservationException,
)
from .repository import Repository as Repository
from .reservation import Reservation as Reservation
from .value_object import Currency as Currency
from .value_object import Money as Money
