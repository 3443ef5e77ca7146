from __future__ import annotations

from dataclasses import dataclass

from travel_booking.config import settings

# 提携先の料金表で使われる通貨
SUPPORTED_CODES = ("USD", "EUR", "JPY")


@dataclass(frozen=True)
class Currency:
    """料金表示に使う通貨コード"""

    code: str

    def __post_init__(self) -> None:
        code = self.code.upper()
        if code not in SUPPORTED_CODES:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(SUPPORTED_CODES)}"
            )
        object.__setattr__(self, "code", code)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def usd(cls) -> Currency:
        return cls("USD")

    @classmethod
    def default(cls) -> Currency:
        """設定で指定された既定の通貨（提携先の料金はすべてこの通貨）"""
        return cls(settings.default_currency)
