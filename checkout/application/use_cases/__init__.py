"""Application use cases."""
from .checkout_order import (
    CheckoutUseCase,
    CheckoutContext,
    CheckoutResult,
)

__all__ = [
    "CheckoutUseCase",
    "CheckoutContext",
    "CheckoutResult",
]
