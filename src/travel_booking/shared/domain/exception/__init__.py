from .exceptions import DomainException as DomainException
from .exceptions import DuplicateResourceException as DuplicateResourceException
from .exceptions import (
    IncompleteReservationException as IncompleteReservationException,
)
