from travel_booking.payment.domain import PaymentFactory, PaymentMethod
from travel_booking.payment.infrastructure.paypal_payment import PaypalPayment
from travel_booking.payment.infrastructure.square_payment import SquarePayment
from travel_booking.payment.infrastructure.stripe_payment import StripePayment

PAYMENT_STRATEGIES = {
    PaymentMethod.PAYPAL: PaypalPayment,
    PaymentMethod.STRIPE: StripePayment,
    PaymentMethod.SQUARE: SquarePayment,
}


def build_payment_factory() -> PaymentFactory:
    """対応済みの決済手段をすべて登録したファクトリを生成する"""
    return PaymentFactory(strategies=PAYMENT_STRATEGIES)
