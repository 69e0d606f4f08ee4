"""Application layer - use cases, interfaces, and DTOs."""

from .interfaces import Clock, EventPublisher, PaymentGateway
from .use_cases import CheckoutContext, CheckoutResult, CheckoutUseCase

__all__ = [
    # Use Cases
    "CheckoutUseCase",
    "CheckoutContext",
    "CheckoutResult",
    # Interfaces
    "Clock",
    "EventPublisher",
    "PaymentGateway",
]
