from travel_booking.payment.domain import PaymentFactory, TransactionRequest
from travel_booking.shared.utils import get_logger

logger = get_logger("payment")


class ProcessPaymentService:
    """決済処理ユースケース

    決済手段の解決 → 利用者・カード情報の受け渡し → 支払い の順に実行する。
    どの段階で失敗しても False を返し、呼び出し側の旅程には手を触れない。
    """

    def __init__(self, factory: PaymentFactory) -> None:
        self._factory = factory

    def process(self, request: TransactionRequest) -> bool:
        """決済を処理する"""
        strategy = self._factory.create(request.method)
        if strategy is None:
            return False

        strategy.set_user_info(request)
        strategy.set_card_info(request)
        paid = strategy.pay(request.amount)
        logger.info(
            "Payment processed",
            extra={"method": request.method, "paid": paid},
        )
        return paid
