from enum import Enum


class PaymentMethod(str, Enum):
    """利用可能な決済手段"""

    PAYPAL = "paypal"
    STRIPE = "stripe"
    SQUARE = "square"
