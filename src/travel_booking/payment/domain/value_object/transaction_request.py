from dataclasses import dataclass

from travel_booking.shared.domain import Money


@dataclass(frozen=True)
class TransactionRequest:
    """1回の決済試行ごとに作られる取引情報（保存しない）"""

    method: str
    cardholder_name: str
    address: str
    card_id: str
    expiry: str
    cvv: str
    amount: Money
