from dataclasses import dataclass
from decimal import Decimal


@dataclass
class PayPalCreditCard:
    """PayPal API に渡すカード・利用者情報"""

    name: str = ""
    address: str = ""
    id: str = ""
    expire_date: str = ""
    ccv: str = ""


class PayPalOnlinePaymentAPI:
    """PayPal のオンライン決済 API（スタブ）"""

    def set_card_info(self, card: PayPalCreditCard) -> None:
        pass

    def set_user_info(self, user: PayPalCreditCard) -> None:
        pass

    def make_payment(self, money: Decimal) -> bool:
        return True
