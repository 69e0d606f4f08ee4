"""
Checkout error taxonomy.

Every failure the checkout core can surface to its caller.

The class attribute ``retryable`` tells the caller whether re-running the
whole checkout is safe. ``PostChargePersistenceFailedError`` is the one
condition that must never be blindly retried: the customer has already been
charged and only the status write is missing.
"""
import asyncio
from typing import Optional


class CheckoutError(Exception):
    """Base class for all checkout failures."""

    retryable: bool = False

    def __init__(self, message: str, order_id: Optional[str] = None):
        super().__init__(message)
        self.order_id = order_id


class OrderNotFoundError(CheckoutError):
    """Order identifier is unknown to the repository."""

    def __init__(self, order_id: str):
        super().__init__(f"Order not found: {order_id}", order_id=order_id)


class InvalidStatusError(CheckoutError):
    """Order is not in a status that allows checkout."""

    def __init__(self, order_id: str, status):
        super().__init__(
            f"Order {order_id} cannot be checked out from status '{_status_value(status)}'",
            order_id=order_id,
        )
        self.status = status


class OrderExpiredError(CheckoutError):
    """Order passed its expiry before checkout."""

    def __init__(self, order_id: str, expire_at, now):
        super().__init__(
            f"Order {order_id} expired at {expire_at.isoformat()} (now: {now.isoformat()})",
            order_id=order_id,
        )
        self.expire_at = expire_at
        self.now = now


class PaymentFailedError(CheckoutError):
    """Charge was rejected or errored. Order remains pending."""

    retryable = True


class RepositoryError(CheckoutError):
    """Generic persistence failure."""

    retryable = True


class ConflictError(RepositoryError):
    """Status update rejected because the stored order changed concurrently."""


class PostChargePersistenceFailedError(CheckoutError):
    """
    Charge succeeded but the new status could not be persisted.

    Requires reconciliation. Re-running checkout would charge twice.
    """

    def __init__(self, order_id: str, target_status, amount: int, cause: BaseException):
        super().__init__(
            f"Order {order_id} was charged {amount} but status "
            f"'{_status_value(target_status)}' was not persisted: {cause}",
            order_id=order_id,
        )
        self.target_status = target_status
        self.amount = amount
        self.cause = cause


class PublishFailedError(CheckoutError):
    """Completion event could not be emitted after commit. Non-fatal."""

    retryable = True


class CheckoutCancelled(asyncio.CancelledError):
    """
    Checkout was cancelled by the caller while a port call was in flight.

    Subclasses ``asyncio.CancelledError`` so task cancellation keeps working.

    Attributes:
        order_id: Order being checked out
        step: Name of the step that was interrupted
        charged: True if the charge had already succeeded
    """

    def __init__(self, order_id: str, step: str, charged: bool = False):
        super().__init__(f"Checkout of order {order_id} cancelled during '{step}'")
        self.order_id = order_id
        self.step = step
        self.charged = charged


def _status_value(status) -> str:
    return getattr(status, "value", status)


__all__ = [
    "CheckoutError",
    "OrderNotFoundError",
    "InvalidStatusError",
    "OrderExpiredError",
    "PaymentFailedError",
    "RepositoryError",
    "ConflictError",
    "PostChargePersistenceFailedError",
    "PublishFailedError",
    "CheckoutCancelled",
]
