import json

from travel_booking.payment.domain import PaymentStrategy, TransactionRequest
from travel_booking.payment.infrastructure.square_api import SquarePaymentAPI
from travel_booking.shared.domain import Money
from travel_booking.shared.utils import get_logger

logger = get_logger("payment")


class SquarePayment(PaymentStrategy):
    """Square 決済アダプタ

    Square API は JSON 文字列を受け取るため、問い合わせを辞書で組み立てて直列化する。
    """

    def __init__(self, api: SquarePaymentAPI | None = None) -> None:
        self._api = api or SquarePaymentAPI()
        self._query: dict = {}

    @property
    def query(self) -> dict:
        return self._query

    def set_user_info(self, request: TransactionRequest) -> None:
        self._query["user_info"] = [request.cardholder_name, request.address]

    def set_card_info(self, request: TransactionRequest) -> None:
        self._query["card_info"] = {
            "id": request.card_id,
            "ccv": request.cvv,
            "expire_date": request.expiry,
        }

    def pay(self, amount: Money) -> bool:
        self._query["Payment_money"] = [amount.amount]
        payload = json.dumps(self._query, default=str)
        if self._api.withdraw_money(payload):
            logger.info("Square payment completed", extra={"amount": str(amount)})
            return True
        logger.warning("Square payment declined", extra={"amount": str(amount)})
        return False
