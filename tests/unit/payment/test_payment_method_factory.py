from travel_booking.payment.infrastructure import (
    PaypalPayment,
    SquarePayment,
    StripePayment,
    build_payment_factory,
)


class TestPaymentFactory:
    def test_create_each_supported_method(self):
        factory = build_payment_factory()

        assert isinstance(factory.create("paypal"), PaypalPayment)
        assert isinstance(factory.create("stripe"), StripePayment)
        assert isinstance(factory.create("square"), SquarePayment)

    def test_unknown_method_returns_none(self):
        factory = build_payment_factory()

        assert factory.create("bitcoin") is None

    def test_method_is_case_sensitive(self):
        factory = build_payment_factory()

        assert factory.create("PayPal") is None

    def test_each_call_returns_new_instance(self):
        factory = build_payment_factory()

        assert factory.create("paypal") is not factory.create("paypal")
