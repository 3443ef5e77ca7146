import pytest

from travel_booking.flight.domain import FlightBookingRequest


class TestFlightBookingRequest:
    def test_negative_count_raises_error(self):
        with pytest.raises(ValueError, match="Passenger counts cannot be negative"):
            FlightBookingRequest(
                origin_city="Cairo",
                destination_city="Istanbul",
                depart_date="25-01-2022",
                return_date="10-02-2022",
                adults=-1,
            )
