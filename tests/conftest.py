"""Shared fixtures for checkout tests."""
from datetime import datetime, timedelta, timezone

import pytest

from checkout.application.use_cases.checkout_order import CheckoutUseCase
from checkout.domain.entities.order import Order
from checkout.domain.enums import OrderStatus
from checkout.infrastructure.adapters.payments import FakePaymentGateway
from checkout.infrastructure.adapters.persistence import InMemoryOrderRepository
from checkout.infrastructure.bus import InMemoryEventPublisher
from checkout.infrastructure.clock import FixedClock


NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_order(
    order_id: str = "order-1",
    status: OrderStatus = OrderStatus.PENDING,
    amount: int = 1000,
    expire_at: datetime = NOW + timedelta(hours=1),
    card_token: str = "tok_visa",
) -> Order:
    """Build an Order with sensible defaults."""
    return Order(
        order_id=order_id,
        status=status,
        amount=amount,
        expire_at=expire_at,
        card_token=card_token,
    )


@pytest.fixture
def order_factory():
    """Factory fixture for Order snapshots."""
    return make_order


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def event_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def use_case(order_repository, payment_gateway, event_publisher, clock) -> CheckoutUseCase:
    """CheckoutUseCase wired with in-memory adapters."""
    return CheckoutUseCase(
        order_repository=order_repository,
        payment_gateway=payment_gateway,
        event_publisher=event_publisher,
        clock=clock,
    )
