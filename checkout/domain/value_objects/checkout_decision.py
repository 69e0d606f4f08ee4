"""Checkout decision value object."""
from dataclasses import dataclass

from ..enums import OrderStatus


@dataclass(frozen=True)
class CheckoutDecision:
    """
    Instruction produced by ``Order.decide_checkout``.

    Tells the use case what to do next. Transient: never persisted.
    """
    next_status: OrderStatus
    need_charge: bool
