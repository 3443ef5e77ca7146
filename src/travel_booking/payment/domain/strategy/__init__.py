from .payment_strategy import PaymentStrategy as PaymentStrategy
