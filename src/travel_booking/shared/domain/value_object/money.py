from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """予約・決済で扱う金額

    単価 × 人数・泊数・室数 の積み上げと旅程内の合算にだけ使う。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        # 提携先 API からは int / str の料金も届く
        amount = Decimal(str(self.amount))
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        object.__setattr__(self, "amount", amount)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValueError(
                f"Cannot add money with different currencies: "
                f"{self.currency} and {other.currency}"
            )
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: int) -> Money:
        """数量（人数・泊数・室数）を掛ける"""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.amount * factor, self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """空の旅程の合計"""
        return cls(Decimal(0), currency)

    @classmethod
    def usd(cls, amount: Decimal | int | str) -> Money:
        return cls(amount, Currency.usd())
