"""Domain value objects."""

from .value_objects import ExecutionID
from .checkout_decision import CheckoutDecision

__all__ = [
    "ExecutionID",
    "CheckoutDecision",
]
