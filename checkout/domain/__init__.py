"""Domain layer - pure domain models and interfaces."""

from .entities import Order
from .enums import OrderStatus
from .repositories import OrderRepository
from .value_objects import CheckoutDecision, ExecutionID

__all__ = [
    "CheckoutDecision",
    "ExecutionID",
    "Order",
    "OrderRepository",
    "OrderStatus",
]
