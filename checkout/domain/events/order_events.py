"""
Order Domain Events.

Events emitted by the checkout workflow.
"""
from dataclasses import dataclass
from typing import Any, Dict

from .base import DomainEvent


@dataclass
class OrderPaidEvent(DomainEvent):
    """
    Order was charged and its status persisted as paid.
    
    Topic: order.paid
    """
    
    TOPIC = "order.paid"
    
    order_id: str = ""
    
    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()
    
    def to_payload(self) -> Dict[str, Any]:
        """Wire payload published on the ``order.paid`` topic."""
        return {"order_id": self.order_id}
