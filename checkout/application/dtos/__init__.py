"""Application DTOs."""
from .checkout_dto import CheckoutErrorResponse, CheckoutResponse

__all__ = [
    "CheckoutErrorResponse",
    "CheckoutResponse",
]
