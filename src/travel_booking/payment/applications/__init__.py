from .process_payment import ProcessPaymentService as ProcessPaymentService
