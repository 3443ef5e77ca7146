from collections.abc import Sequence

from travel_booking.config import settings
from travel_booking.console.request_models import (
    FlightSearchInput,
    HotelSearchInput,
    PaymentInput,
)
from travel_booking.console.terminal import Terminal
from travel_booking.flight.domain import FlightBookingRequest, FlightOffer
from travel_booking.hotel.domain import HotelBookingRequest, RoomOffer
from travel_booking.payment.domain import TransactionRequest
from travel_booking.shared.domain import Money

# 入力項目名とプロンプト文言
FLIGHT_FIELDS = {
    "origin_city": "From (city):",
    "depart_date": "Departure date (dd-mm-yyyy):",
    "destination_city": "To (city):",
    "return_date": "Return date (dd-mm-yyyy):",
    "adults": "Number of adults:",
    "children": "Number of children (5-16):",
    "infants": "Number of infants:",
}

HOTEL_FIELDS = {
    "country": "Country:",
    "city": "City:",
    "check_in": "From date (dd-mm-yyyy):",
    "check_out": "To date (dd-mm-yyyy):",
    "adults": "Number of adults:",
    "children": "Number of children:",
    "rooms_needed": "Number of rooms:",
    "nights": "Number of nights:",
}

PAYMENT_FIELDS = {
    "cardholder_name": "Name on card:",
    "address": "Address:",
    "card_id": "Card id:",
    "expiry": "Expiry date:",
    "cvv": "CCV:",
}


def is_cancel(answer: str) -> bool:
    """中止の合図（大文字小文字は区別しない）"""
    return answer.lower() == settings.input_cancel.lower()


def _collect(terminal: Terminal, fields: dict[str, str]) -> dict[str, str] | None:
    """項目を順に尋ねる。途中で中止されたら None"""
    answers: dict[str, str] = {}
    for name, prompt in fields.items():
        answer = terminal.ask(f"{prompt} ('{settings.input_cancel}' to cancel)")
        if is_cancel(answer):
            return None
        answers[name] = answer
    return answers


def ask_flight_request(terminal: Terminal) -> FlightBookingRequest | None:
    """フライト検索条件を入力させる

    Raises:
        pydantic.ValidationError: 入力値が不正な場合
    """
    terminal.show("Enter Flight Info:")
    answers = _collect(terminal, FLIGHT_FIELDS)
    if answers is None:
        return None
    return FlightSearchInput.model_validate(answers).to_request()


def ask_hotel_request(terminal: Terminal) -> HotelBookingRequest | None:
    """宿泊検索条件を入力させる

    Raises:
        pydantic.ValidationError: 入力値が不正な場合
    """
    terminal.show("Enter Hotel Info:")
    answers = _collect(terminal, HOTEL_FIELDS)
    if answers is None:
        return None
    return HotelSearchInput.model_validate(answers).to_request()


def ask_transaction(terminal: Terminal, amount: Money) -> TransactionRequest | None:
    """決済手段とカード情報を入力させる

    Raises:
        pydantic.ValidationError: 入力値が不正な場合
    """
    terminal.show(f"Total to pay: {amount}")
    terminal.show("Choose payment method:\n\t1- PayPal\n\t2- Stripe\n\t3- Square")
    method = terminal.ask(f"Enter choice ('{settings.input_cancel}' to cancel):")
    if is_cancel(method):
        return None

    answers = _collect(terminal, PAYMENT_FIELDS)
    if answers is None:
        return None
    return PaymentInput.model_validate({"method": method, **answers}).to_transaction(amount)


class OfferMenu:
    """検索結果を番号付きで表示し、選ばれた番号を返すセレクタ

    数値として読めない入力は中止として扱う。
    """

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal

    def __call__(self, offers: Sequence[FlightOffer] | Sequence[RoomOffer]) -> int:
        if not offers:
            self._terminal.show("No offers found.")
            return settings.selection_cancel

        for number, offer in enumerate(offers, start=1):
            self._terminal.show(f"{number}: {offer}")

        answer = self._terminal.ask(
            f"Enter choice ({settings.selection_cancel} to cancel):"
        )
        try:
            return int(answer)
        except ValueError:
            return settings.selection_cancel
