from abc import ABC, abstractmethod

from travel_booking.payment.domain.value_object import TransactionRequest
from travel_booking.shared.domain import Money


class PaymentStrategy(ABC):
    """決済手段ごとのアダプタの共通インターフェース

    set_user_info / set_card_info は値の受け渡しのみで検証は行わない。
    """

    @abstractmethod
    def set_user_info(self, request: TransactionRequest) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_card_info(self, request: TransactionRequest) -> None:
        raise NotImplementedError

    @abstractmethod
    def pay(self, amount: Money) -> bool:
        """決済代行 API に支払いを依頼する"""
        raise NotImplementedError
