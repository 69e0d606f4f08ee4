"""Domain events."""
from .base import DomainEvent
from .order_events import OrderPaidEvent

__all__ = [
    "DomainEvent",
    "OrderPaidEvent",
]
