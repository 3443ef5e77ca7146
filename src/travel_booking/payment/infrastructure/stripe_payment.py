from travel_booking.payment.domain import PaymentStrategy, TransactionRequest
from travel_booking.payment.infrastructure.stripe_api import (
    StripeCardInfo,
    StripePaymentAPI,
    StripeUserInfo,
)
from travel_booking.shared.domain import Money
from travel_booking.shared.utils import get_logger

logger = get_logger("payment")


class StripePayment(PaymentStrategy):
    """Stripe 決済アダプタ"""

    def __init__(self, api: StripePaymentAPI | None = None) -> None:
        self._api = api or StripePaymentAPI()
        self._user = StripeUserInfo()
        self._card = StripeCardInfo()

    def set_user_info(self, request: TransactionRequest) -> None:
        self._user.name = request.cardholder_name
        self._user.address = request.address

    def set_card_info(self, request: TransactionRequest) -> None:
        self._card.id = request.card_id
        self._card.expire_date = request.expiry
        self._card.ccv = request.cvv

    def pay(self, amount: Money) -> bool:
        if self._api.withdraw_money(self._user, self._card, amount.amount):
            logger.info("Stripe payment completed", extra={"amount": str(amount)})
            return True
        logger.warning("Stripe payment declined", extra={"amount": str(amount)})
        return False
