"""
Order Status Enum.

Status values persisted for an order.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""
    
    PENDING = "pending"
    PAID = "paid"
    EXPIRED = "expired"
