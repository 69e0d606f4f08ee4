"""Tests for the checkout error taxonomy."""

import asyncio

from checkout.domain.enums import OrderStatus
from checkout.domain.exceptions import (
    CheckoutCancelled,
    CheckoutError,
    ConflictError,
    InvalidStatusError,
    OrderNotFoundError,
    PaymentFailedError,
    PostChargePersistenceFailedError,
    PublishFailedError,
    RepositoryError,
)


def test_retryable_flags():
    """Only failures that leave the order untouched (or are post-commit) are retryable."""
    assert PaymentFailedError("declined").retryable is True
    assert RepositoryError("down").retryable is True
    assert PublishFailedError("down").retryable is True
    assert OrderNotFoundError("order-1").retryable is False
    assert InvalidStatusError("order-1", OrderStatus.PAID).retryable is False


def test_post_charge_failure_is_not_retryable_and_keeps_cause():
    cause = ConflictError("already paid", order_id="order-1")

    error = PostChargePersistenceFailedError("order-1", OrderStatus.PAID, 1000, cause)

    assert error.retryable is False
    assert error.cause is cause
    assert error.amount == 1000
    assert error.target_status == OrderStatus.PAID
    assert "charged 1000" in str(error)
    assert "'paid'" in str(error)
    # Distinct from a plain repository failure
    assert not isinstance(error, RepositoryError)


def test_conflict_is_a_repository_error():
    assert issubclass(ConflictError, RepositoryError)


def test_invalid_status_message_uses_status_value():
    error = InvalidStatusError("order-1", OrderStatus.PAID)

    assert str(error) == "Order order-1 cannot be checked out from status 'paid'"


def test_checkout_cancelled_is_a_cancelled_error_not_a_checkout_error():
    error = CheckoutCancelled("order-1", "charge", charged=False)

    assert isinstance(error, asyncio.CancelledError)
    assert not isinstance(error, CheckoutError)
    assert error.step == "charge"
    assert error.charged is False
