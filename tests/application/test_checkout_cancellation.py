"""Tests for CheckoutUseCase behavior when the calling task is cancelled."""

import asyncio

import pytest

from checkout.application.interfaces import PaymentGateway
from checkout.application.use_cases.checkout_order import CheckoutUseCase
from checkout.domain.enums import OrderStatus
from checkout.domain.exceptions import CheckoutCancelled
from checkout.infrastructure.adapters.persistence import InMemoryOrderRepository
from checkout.infrastructure.bus import InMemoryEventPublisher


class BlockingPaymentGateway(PaymentGateway):
    """Charge that hangs until cancelled."""

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.aborted = False

    async def charge(self, card_token: str, amount: int, idempotency_key=None) -> None:
        self.started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.aborted = True
            raise


class BlockingStatusRepository(InMemoryOrderRepository):
    """Repository whose status update hangs until cancelled."""

    def __init__(self) -> None:
        super().__init__()
        self.update_started = asyncio.Event()

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        self.update_started.set()
        await asyncio.Event().wait()


class BlockingLookupRepository(InMemoryOrderRepository):
    """Repository whose lookup hangs until cancelled."""

    def __init__(self) -> None:
        super().__init__()
        self.find_started = asyncio.Event()

    async def find(self, order_id: str):
        self.find_started.set()
        await asyncio.Event().wait()


class BlockingEventPublisher(InMemoryEventPublisher):
    """Publisher that hangs until cancelled."""

    def __init__(self) -> None:
        super().__init__()
        self.publish_started = asyncio.Event()

    async def publish(self, topic, payload) -> None:
        self.publish_started.set()
        await asyncio.Event().wait()


async def _run_and_capture(use_case: CheckoutUseCase, captured: dict) -> None:
    try:
        await use_case.execute("order-1")
    except CheckoutCancelled as e:
        captured["error"] = e
        raise


@pytest.mark.asyncio
async def test_cancel_during_charge_aborts_and_skips_persistence(
    order_repository, event_publisher, clock, order_factory
):
    order_repository.add(order_factory())
    gateway = BlockingPaymentGateway()
    use_case = CheckoutUseCase(order_repository, gateway, event_publisher, clock)
    captured: dict = {}

    task = asyncio.create_task(_run_and_capture(use_case, captured))
    await gateway.started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    error = captured["error"]
    assert error.order_id == "order-1"
    assert error.step == "charge"
    assert error.charged is False
    assert gateway.aborted is True
    assert task.cancelled()
    assert (await order_repository.find("order-1")).status == OrderStatus.PENDING
    assert event_publisher.published == []


@pytest.mark.asyncio
async def test_cancel_during_status_update_reports_charge_made(
    payment_gateway, event_publisher, clock, order_factory
):
    repository = BlockingStatusRepository()
    repository.add(order_factory())
    use_case = CheckoutUseCase(repository, payment_gateway, event_publisher, clock)
    captured: dict = {}

    task = asyncio.create_task(_run_and_capture(use_case, captured))
    await repository.update_started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    error = captured["error"]
    assert error.step == "update_status"
    assert error.charged is True
    assert len(payment_gateway.calls) == 1
    assert event_publisher.published == []


@pytest.mark.asyncio
async def test_cancel_during_find_stops_before_charge(
    payment_gateway, event_publisher, clock, order_factory
):
    repository = BlockingLookupRepository()
    repository.add(order_factory())
    use_case = CheckoutUseCase(repository, payment_gateway, event_publisher, clock)
    captured: dict = {}

    task = asyncio.create_task(_run_and_capture(use_case, captured))
    await repository.find_started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    error = captured["error"]
    assert error.step == "find"
    assert error.charged is False
    assert payment_gateway.calls == []
    assert event_publisher.published == []


@pytest.mark.asyncio
async def test_cancel_during_publish_reports_committed_checkout(
    order_repository, payment_gateway, clock, order_factory
):
    """Charge and status are committed; only the event is lost."""
    order_repository.add(order_factory())
    publisher = BlockingEventPublisher()
    use_case = CheckoutUseCase(order_repository, payment_gateway, publisher, clock)
    captured: dict = {}

    task = asyncio.create_task(_run_and_capture(use_case, captured))
    await publisher.publish_started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    error = captured["error"]
    assert error.step == "publish"
    assert error.charged is True
    assert len(payment_gateway.calls) == 1
    assert (await order_repository.find("order-1")).status == OrderStatus.PAID
