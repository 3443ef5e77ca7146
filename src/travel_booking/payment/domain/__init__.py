from .enum import PaymentMethod as PaymentMethod
from .factory import PaymentFactory as PaymentFactory
from .strategy import PaymentStrategy as PaymentStrategy
from .value_object import TransactionRequest as TransactionRequest
