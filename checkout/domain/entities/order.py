"""
Order entity.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass
from datetime import datetime

from ..enums import OrderStatus
from ..exceptions import InvalidStatusError, OrderExpiredError
from ..value_objects import CheckoutDecision


@dataclass(frozen=True)
class Order:
    """
    Order snapshot as loaded from the repository.

    Read-only input to the checkout decision. The persisted status only
    changes through ``OrderRepository.update_status``.
    """
    order_id: str
    status: OrderStatus
    amount: int  # minor currency unit
    expire_at: datetime
    card_token: str = ""

    def __post_init__(self):
        if not self.order_id:
            raise ValueError("Order ID cannot be empty")

        if not isinstance(self.status, OrderStatus):
            object.__setattr__(self, 'status', OrderStatus(self.status))

        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(
                f"Amount must be an integer in minor units, got: {self.amount!r}"
            )
        if self.amount < 0:
            raise ValueError(f"Amount cannot be negative: {self.amount}")

        if self.expire_at.tzinfo is None or self.expire_at.utcoffset() is None:
            raise ValueError(
                f"expire_at must be timezone-aware, got: {self.expire_at!r}"
            )

    def decide_checkout(self, now: datetime) -> CheckoutDecision:
        """
        Decide what checkout must do for this order at ``now``.

        Pure: no I/O, never mutates the order.

        Args:
            now: Current time (timezone-aware, comparable with expire_at)

        Returns:
            CheckoutDecision to move to PAID after charging

        Raises:
            InvalidStatusError: If the order is not pending
            OrderExpiredError: If now is past expire_at
        """
        if self.status != OrderStatus.PENDING:
            raise InvalidStatusError(self.order_id, self.status)
        if now > self.expire_at:
            raise OrderExpiredError(self.order_id, self.expire_at, now)

        return CheckoutDecision(
            next_status=OrderStatus.PAID,
            need_charge=True,
        )
