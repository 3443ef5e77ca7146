from .method_registry import build_payment_factory as build_payment_factory
from .paypal_payment import PaypalPayment as PaypalPayment
from .square_payment import SquarePayment as SquarePayment
from .stripe_payment import StripePayment as StripePayment
