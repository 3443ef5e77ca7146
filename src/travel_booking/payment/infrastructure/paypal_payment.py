from travel_booking.payment.domain import PaymentStrategy, TransactionRequest
from travel_booking.payment.infrastructure.paypal_api import (
    PayPalCreditCard,
    PayPalOnlinePaymentAPI,
)
from travel_booking.shared.domain import Money
from travel_booking.shared.utils import get_logger

logger = get_logger("payment")


class PaypalPayment(PaymentStrategy):
    """PayPal 決済アダプタ

    利用者情報とカード情報を1つのレコードにまとめて API に渡す。
    """

    def __init__(self, api: PayPalOnlinePaymentAPI | None = None) -> None:
        self._api = api or PayPalOnlinePaymentAPI()
        self._card = PayPalCreditCard()

    def set_user_info(self, request: TransactionRequest) -> None:
        self._card.name = request.cardholder_name
        self._card.address = request.address

    def set_card_info(self, request: TransactionRequest) -> None:
        self._card.id = request.card_id
        self._card.expire_date = request.expiry
        self._card.ccv = request.cvv

    def pay(self, amount: Money) -> bool:
        self._api.set_card_info(self._card)
        self._api.set_user_info(self._card)
        if self._api.make_payment(amount.amount):
            logger.info("PayPal payment completed", extra={"amount": str(amount)})
            return True
        logger.warning("PayPal payment declined", extra={"amount": str(amount)})
        return False
