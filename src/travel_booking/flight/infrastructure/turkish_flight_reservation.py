from __future__ import annotations

from dataclasses import replace

from travel_booking.flight.domain import (
    AirlineBrand,
    FlightBookingRequest,
    FlightOffer,
    FlightReservation,
)
from travel_booking.flight.infrastructure.turkish_airlines_api import (
    TurkishAirlineOnlineAPI,
    TurkishCustomerInfo,
    TurkishFlight,
)
from travel_booking.shared.domain import (
    Currency,
    IncompleteReservationException,
    Money,
)
from travel_booking.shared.utils import get_logger

logger = get_logger("flight")


class TurkishFlightReservation(FlightReservation):
    """Turkish Airlines 向けのフライト予約アダプタ"""

    def __init__(
        self,
        request: FlightBookingRequest | None = None,
        offer: FlightOffer | None = None,
        api: TurkishAirlineOnlineAPI | None = None,
    ) -> None:
        self._api = api or TurkishAirlineOnlineAPI()
        self._customer: TurkishCustomerInfo | None = None
        self._flight: TurkishFlight | None = None
        self._currency = Currency.default()

        if request is not None:
            self.set_customer_info(request)
        if offer is not None:
            self.set_chosen_offer(offer)

    @property
    def customer(self) -> TurkishCustomerInfo | None:
        return self._customer

    @property
    def chosen_flight(self) -> TurkishFlight | None:
        return self._flight

    def set_customer_info(self, request: FlightBookingRequest) -> None:
        if request is None:
            raise IncompleteReservationException("Customer info cannot be None")
        self._customer = TurkishCustomerInfo(
            from_city=request.origin_city,
            to_city=request.destination_city,
            datetime_from=request.depart_date,
            datetime_to=request.return_date,
            adults=request.adults,
            children=request.children,
            infants=request.infants,
        )

    def set_chosen_offer(self, offer: FlightOffer) -> None:
        if offer is None:
            raise IncompleteReservationException("Chosen flight cannot be None")
        self._flight = TurkishFlight(
            cost=offer.price_per_passenger.amount,
            datetime_from=offer.depart_date,
            datetime_to=offer.return_date,
        )
        self._currency = offer.price_per_passenger.currency

    def search(self) -> list[FlightOffer]:
        customer = self._require(self._customer, "Customer info")
        # 区間情報と搭乗者情報は別々の API で登録する
        self._api.set_from_to_info(customer)
        self._api.set_passenger_info(customer)
        offers = [
            FlightOffer(
                carrier=AirlineBrand.TURKISH.value,
                price_per_passenger=Money(flight.cost, self._currency),
                depart_date=flight.datetime_from,
                return_date=flight.datetime_to,
            )
            for flight in self._api.get_available_flights()
        ]
        logger.info("Turkish Airlines search finished", extra={"offers": len(offers)})
        return offers

    def cost(self) -> Money:
        customer = self._require(self._customer, "Customer info")
        flight = self._require(self._flight, "Chosen flight")
        passengers = customer.adults + customer.children + customer.infants
        return Money(flight.cost, self._currency).multiply(passengers)

    def describe(self) -> str:
        customer = self._require(self._customer, "Customer info")
        return (
            "Airline Reservation / Turkish Airline:\n"
            f"From: {customer.from_city}  on: {customer.datetime_from}"
            f"  To: {customer.to_city}  on: {customer.datetime_to}\n"
            f"\t\tAdults: {customer.adults}  -  Children: {customer.children}"
            f"  -  Infants: {customer.infants}\n"
            f"\t\tFlight Cost: {self.cost()}"
        )

    def clone(self) -> TurkishFlightReservation:
        duplicate = TurkishFlightReservation(api=self._api)
        duplicate._customer = replace(self._customer) if self._customer else None
        duplicate._flight = replace(self._flight) if self._flight else None
        duplicate._currency = self._currency
        return duplicate

    def commit(self) -> bool:
        customer = self._require(self._customer, "Customer info")
        flight = self._require(self._flight, "Chosen flight")
        reserved = self._api.reserve_flight(customer, flight)
        if not reserved:
            logger.warning("Turkish Airlines declined the reservation")
        return reserved

    def cancel(self) -> bool:
        customer = self._require(self._customer, "Customer info")
        flight = self._require(self._flight, "Chosen flight")
        cancelled = self._api.cancel_reserved_flight(customer, flight)
        if not cancelled:
            logger.warning("Turkish Airlines declined the cancellation")
        return cancelled
