from collections.abc import Callable, Mapping

from travel_booking.payment.domain.strategy import PaymentStrategy
from travel_booking.shared.utils import get_logger

logger = get_logger("payment")


class PaymentFactory:
    """決済手段名から決済アダプタを生成するファクトリ"""

    def __init__(self, strategies: Mapping[str, Callable[[], PaymentStrategy]]) -> None:
        self._strategies = dict(strategies)

    def create(self, method: str) -> PaymentStrategy | None:
        """決済手段名（完全一致）に対応するアダプタを生成する

        Returns:
            PaymentStrategy | None: 未対応の決済手段なら None
        """
        new_strategy = self._strategies.get(method)
        if new_strategy is None:
            logger.warning("Unsupported payment method", extra={"method": method})
            return None
        return new_strategy()
