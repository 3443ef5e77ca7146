from .transaction_request import TransactionRequest as TransactionRequest
