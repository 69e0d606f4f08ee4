"""
End-to-End Demo: Order Checkout

This demonstrates the complete workflow:
1. Load a pending order
2. Decide checkout (pure rule)
3. Charge the customer
4. Persist the paid status
5. Publish order.paid

Uses in-memory implementations (no database, payment provider or Redis needed).
"""
import asyncio
import logging
from datetime import datetime, timedelta, timezone

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from checkout.application.use_cases.checkout_order import CheckoutUseCase
from checkout.domain.entities.order import Order
from checkout.domain.enums import OrderStatus
from checkout.domain.exceptions import CheckoutError
from checkout.infrastructure.adapters.payments import FakePaymentGateway
from checkout.infrastructure.adapters.persistence import InMemoryOrderRepository
from checkout.infrastructure.bus import InMemoryEventPublisher
from checkout.infrastructure.clock import FixedClock


NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def build_use_case():
    repository = InMemoryOrderRepository()
    gateway = FakePaymentGateway()
    publisher = InMemoryEventPublisher()
    use_case = CheckoutUseCase(
        order_repository=repository,
        payment_gateway=gateway,
        event_publisher=publisher,
        clock=FixedClock(NOW),
    )
    return use_case, repository, gateway, publisher


async def demo_checkout():
    """Demo: successful checkout followed by the rejected cases."""

    print("\n" + "="*80)
    print("DEMO: Order Checkout")
    print("="*80 + "\n")

    use_case, repository, gateway, publisher = build_use_case()

    repository.add(Order("order-1", OrderStatus.PENDING, 1000, NOW + timedelta(hours=1), "tok_visa"))
    repository.add(Order("order-2", OrderStatus.PAID, 500, NOW + timedelta(hours=1), "tok_visa"))
    repository.add(Order("order-3", OrderStatus.PENDING, 700, NOW - timedelta(hours=1), "tok_visa"))

    result = await use_case.execute("order-1")
    print(f"✅ {result.order_id}: {result.status.value} (event published: {result.event_published})")

    for order_id in ("order-2", "order-3", "order-404"):
        try:
            await use_case.execute(order_id)
        except CheckoutError as e:
            print(f"❌ {order_id}: {type(e).__name__}: {e}")

    print(f"\n💳 Charges made: {len(gateway.calls)}")
    print(f"📣 Messages published: {publisher.published}")


async def main():
    try:
        await demo_checkout()
        print("\n✅ Demo completed successfully!")
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)


if __name__ == "__main__":
    asyncio.run(main())
