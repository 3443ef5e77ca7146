from pydantic import ValidationError

from travel_booking.account.applications import AccountService
from travel_booking.account.infrastructure import InMemoryUserRepository
from travel_booking.console.prompts import (
    OfferMenu,
    ask_flight_request,
    ask_hotel_request,
    ask_transaction,
)
from travel_booking.console.terminal import RichTerminal, Terminal
from travel_booking.flight.domain import FlightReservation
from travel_booking.hotel.domain import HotelReservation
from travel_booking.itinerary.applications import ItineraryBuilder, MakeReservationService
from travel_booking.itinerary.domain import Itinerary
from travel_booking.itinerary.infrastructure import build_reservation_factory
from travel_booking.payment.applications import ProcessPaymentService
from travel_booking.payment.infrastructure import build_payment_factory
from travel_booking.shared.domain import Reservation
from travel_booking.shared.utils import get_logger

logger = get_logger("console")

MAIN_MENU = "Menu:\n\t1: Sign Up\n\t2: Sign In\n\t3: Exit"
SESSION_MENU = (
    "Menu:\n\t1: View Profile\n\t2: Make Itinerary"
    "\n\t3: List My Itineraries\n\t4: Logout"
)
ITINERARY_MENU = (
    "Create your itinerary:\n\t1: Add Flight\n\t2: Add Hotel"
    "\n\t3: Done (Save)\n\t4: Cancel"
)


class TravelAgency:
    """対話型の旅行予約コーディネータ

    メニュー操作を各ユースケース（アカウント・旅程・決済）に振り分ける。
    入力エラーはメッセージを表示してメニューに戻る。
    """

    def __init__(
        self,
        terminal: Terminal,
        accounts: AccountService,
        itinerary_builder: ItineraryBuilder,
        payments: ProcessPaymentService,
    ) -> None:
        self._terminal = terminal
        self._accounts = accounts
        self._builder = itinerary_builder
        self._payments = payments

    def run(self) -> None:
        """終了が選ばれるまでメインメニューを繰り返す"""
        while True:
            self._terminal.show(MAIN_MENU)
            choice = self._terminal.ask("Enter choice:")
            if choice == "1":
                self.sign_up()
            elif choice == "2":
                if self.sign_in():
                    self.session_menu()
            elif choice == "3":
                return
            else:
                self._terminal.show("Invalid choice.")

    def sign_up(self) -> bool:
        username = self._terminal.ask("Enter user name:")
        if self._accounts.username_exists(username):
            self._terminal.show("Already used. Try again.")
            return False
        email = self._terminal.ask("Enter email:")
        if self._accounts.email_exists(email):
            self._terminal.show("Already used. Try again.")
            return False
        password = self._terminal.ask("Enter password:")

        registered = self._accounts.register(username, password, email)
        if registered:
            self._terminal.show("Signed up successfully.")
        return registered

    def sign_in(self) -> bool:
        username = self._terminal.ask("Enter user name:")
        password = self._terminal.ask("Enter password:")
        if self._accounts.authenticate(username, password) is None:
            self._terminal.show("Error: Invalid user name or password.")
            return False
        self._terminal.show(f"Hello {username} | User View")
        return True

    def session_menu(self) -> None:
        """ログアウトするまでログイン後のメニューを繰り返す"""
        while self._accounts.current_user is not None:
            self._terminal.show(SESSION_MENU)
            choice = self._terminal.ask("Enter choice:")
            if choice == "1":
                self._terminal.show(self._accounts.view_profile() or "")
            elif choice == "2":
                self.make_itinerary()
            elif choice == "3":
                self._terminal.show(self._accounts.view_itineraries() or "")
            elif choice == "4":
                self.logout()
            else:
                self._terminal.show("Invalid choice.")

    def logout(self) -> None:
        """ログアウトし、作業中の旅程を破棄する"""
        self._accounts.logout()
        self._builder.clear_itinerary()

    def make_itinerary(self) -> None:
        """保存または取消までフライト・ホテルを追加する"""
        while True:
            self._terminal.show(ITINERARY_MENU)
            choice = self._terminal.ask("Enter choice:")
            if choice == "1":
                self.add_flight()
            elif choice == "2":
                self.add_hotel()
            elif choice == "3":
                self.save()
                return
            elif choice == "4":
                self._builder.clear_itinerary()
                return
            else:
                self._terminal.show("Invalid choice.")

    def add_flight(self) -> bool:
        try:
            request = ask_flight_request(self._terminal)
        except ValidationError as e:
            self._report_invalid_input(e)
            return False
        if request is None:
            return False
        return self._builder.add_flight(request, OfferMenu(self._terminal))

    def add_hotel(self) -> bool:
        try:
            request = ask_hotel_request(self._terminal)
        except ValidationError as e:
            self._report_invalid_input(e)
            return False
        if request is None:
            return False
        return self._builder.add_hotel(request, OfferMenu(self._terminal))

    def save(self) -> bool:
        """旅程の代金を決済し、成功したら予約を確定して利用者に保存する

        決済に失敗した場合、作業中の旅程はそのまま残る。
        """
        if self._builder.check_itinerary():
            self._terminal.show("Empty Itinerary.")
            return False

        itinerary = self._builder.itinerary
        try:
            transaction = ask_transaction(self._terminal, itinerary.cost())
        except ValidationError as e:
            self._report_invalid_input(e)
            return False
        if transaction is None or not self._payments.process(transaction):
            self._terminal.show("Payment is not made !! (Try Again)")
            return False

        self._commit(itinerary)
        self._accounts.add_itinerary(itinerary)
        self._builder.clear_itinerary()
        self._terminal.show("Itinerary saved.")
        return True

    def _commit(self, reservation: Reservation) -> None:
        """旅程内の各予約を提携先に確定する（結果は待たない）"""
        if isinstance(reservation, Itinerary):
            for child in reservation:
                self._commit(child)
        elif isinstance(reservation, (FlightReservation, HotelReservation)):
            reservation.commit()

    def _report_invalid_input(self, error: ValidationError) -> None:
        logger.info("Invalid input", extra={"errors": error.error_count()})
        fields = ", ".join(str(detail["loc"][0]) for detail in error.errors())
        self._terminal.show(f"Invalid input: {fields}")


def build_travel_agency(terminal: Terminal | None = None) -> TravelAgency:
    """インメモリ構成の依存関係を組み立てる"""
    return TravelAgency(
        terminal=terminal or RichTerminal(),
        accounts=AccountService(InMemoryUserRepository()),
        itinerary_builder=ItineraryBuilder(
            MakeReservationService(build_reservation_factory())
        ),
        payments=ProcessPaymentService(build_payment_factory()),
    )
