from __future__ import annotations

from dataclasses import replace

from travel_booking.flight.domain import (
    AirlineBrand,
    FlightBookingRequest,
    FlightOffer,
    FlightReservation,
)
from travel_booking.flight.infrastructure.air_canada_api import (
    AirCanadaCustomerInfo,
    AirCanadaFlight,
    AirCanadaOnlineAPI,
)
from travel_booking.shared.domain import (
    Currency,
    IncompleteReservationException,
    Money,
)
from travel_booking.shared.utils import get_logger

logger = get_logger("flight")


class CanadaFlightReservation(FlightReservation):
    """Air Canada 向けのフライト予約アダプタ"""

    def __init__(
        self,
        request: FlightBookingRequest | None = None,
        offer: FlightOffer | None = None,
        api: AirCanadaOnlineAPI | None = None,
    ) -> None:
        self._api = api or AirCanadaOnlineAPI()
        self._customer: AirCanadaCustomerInfo | None = None
        self._flight: AirCanadaFlight | None = None
        self._currency = Currency.default()

        if request is not None:
            self.set_customer_info(request)
        if offer is not None:
            self.set_chosen_offer(offer)

    @property
    def customer(self) -> AirCanadaCustomerInfo | None:
        return self._customer

    @property
    def chosen_flight(self) -> AirCanadaFlight | None:
        return self._flight

    def set_customer_info(self, request: FlightBookingRequest) -> None:
        if request is None:
            raise IncompleteReservationException("Customer info cannot be None")
        self._customer = AirCanadaCustomerInfo(
            from_city=request.origin_city,
            to_city=request.destination_city,
            date_time_from=request.depart_date,
            date_time_to=request.return_date,
            adults=request.adults,
            children=request.children,
            infants=request.infants,
        )

    def set_chosen_offer(self, offer: FlightOffer) -> None:
        if offer is None:
            raise IncompleteReservationException("Chosen flight cannot be None")
        self._flight = AirCanadaFlight(
            price=offer.price_per_passenger.amount,
            date_time_from=offer.depart_date,
            date_time_to=offer.return_date,
        )
        self._currency = offer.price_per_passenger.currency

    def search(self) -> list[FlightOffer]:
        customer = self._require(self._customer, "Customer info")
        self._api.set_customer_info(customer)
        offers = [
            FlightOffer(
                carrier=AirlineBrand.CANADA.value,
                price_per_passenger=Money(flight.price, self._currency),
                depart_date=flight.date_time_from,
                return_date=flight.date_time_to,
            )
            for flight in self._api.get_flights()
        ]
        logger.info("Air Canada search finished", extra={"offers": len(offers)})
        return offers

    def cost(self) -> Money:
        customer = self._require(self._customer, "Customer info")
        flight = self._require(self._flight, "Chosen flight")
        passengers = customer.adults + customer.children + customer.infants
        return Money(flight.price, self._currency).multiply(passengers)

    def describe(self) -> str:
        customer = self._require(self._customer, "Customer info")
        return (
            "Airline Reservation / AirCanada Airline:\n"
            f"From: {customer.from_city}  on: {customer.date_time_from}"
            f"  To: {customer.to_city}  on: {customer.date_time_to}\n"
            f"\t\tAdults: {customer.adults}  -  Children: {customer.children}"
            f"  -  Infants: {customer.infants}\n"
            f"\t\tFlight Cost: {self.cost()}"
        )

    def clone(self) -> CanadaFlightReservation:
        duplicate = CanadaFlightReservation(api=self._api)
        duplicate._customer = replace(self._customer) if self._customer else None
        duplicate._flight = replace(self._flight) if self._flight else None
        duplicate._currency = self._currency
        return duplicate

    def commit(self) -> bool:
        customer = self._require(self._customer, "Customer info")
        flight = self._require(self._flight, "Chosen flight")
        reserved = self._api.reserve_flight(flight, customer)
        if not reserved:
            logger.warning("Air Canada declined the reservation")
        return reserved

    def cancel(self) -> bool:
        customer = self._require(self._customer, "Customer info")
        flight = self._require(self._flight, "Chosen flight")
        cancelled = self._api.cancel_reserve_flight(flight, customer)
        if not cancelled:
            logger.warning("Air Canada declined the cancellation")
        return cancelled
