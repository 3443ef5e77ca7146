from dataclasses import dataclass
from decimal import Decimal


@dataclass
class StripeUserInfo:
    """Stripe API の利用者情報"""

    name: str = ""
    address: str = ""


@dataclass
class StripeCardInfo:
    """Stripe API のカード情報"""

    id: str = ""
    expire_date: str = ""
    ccv: str = ""


class StripePaymentAPI:
    """Stripe の決済 API（スタブ）"""

    def withdraw_money(
        self, user: StripeUserInfo, card: StripeCardInfo, money: Decimal
    ) -> bool:
        return True
