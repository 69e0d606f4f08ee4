"""
Checkout Order Use Case.

Moves a pending order to paid: charge, persist, announce.

CRITICAL: This handles money. Every step is logged with the execution ID.

Flow:
1. Load order snapshot from the repository
2. Ask the order for a checkout decision (pure rule)
3. Charge the customer (if the decision says so)
4. Persist the new status
5. Publish order.paid (best-effort)

The use case holds no business rule: every decision comes from
``Order.decide_checkout``. Its only logic is step order and error mapping.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import asyncio
import logging

from checkout.domain.entities.order import Order
from checkout.domain.enums import OrderStatus
from checkout.domain.events import OrderPaidEvent
from checkout.domain.exceptions import (
    CheckoutCancelled,
    CheckoutError,
    PaymentFailedError,
    PostChargePersistenceFailedError,
    PublishFailedError,
    RepositoryError,
)
from checkout.domain.repositories.order_repository import OrderRepository
from checkout.domain.value_objects import CheckoutDecision, ExecutionID
from checkout.application.interfaces import Clock, EventPublisher, PaymentGateway


logger = logging.getLogger(__name__)


def charge_idempotency_key(order_id: str, execution_id: ExecutionID) -> str:
    """
    Idempotency key for the charge of one checkout execution.

    A caller that retries with the same execution ID reuses the key, so the
    provider collapses the repeated charge.
    """
    return f"checkout:{order_id}:{execution_id}"


# =============================================================================
# CONTEXT / RESULT
# =============================================================================

@dataclass
class CheckoutContext:
    """
    Per-invocation context.

    Cancellation comes from the asyncio task running ``execute``;
    this object only carries tracing data.
    """
    execution_id: ExecutionID = field(default_factory=ExecutionID.generate)


@dataclass
class CheckoutResult:
    """
    Successful checkout outcome.

    Charge and status are committed whenever a result is returned.
    ``publish_error`` is set when the order.paid event could not be
    emitted; that failure does not undo the checkout.
    """
    execution_id: ExecutionID
    order_id: str
    status: OrderStatus
    charged: bool
    completed_at: datetime
    publish_error: Optional[PublishFailedError] = None

    @property
    def event_published(self) -> bool:
        return self.publish_error is None


# =============================================================================
# USE CASE
# =============================================================================

class CheckoutUseCase:
    """
    Orchestrates a single checkout.

    Stateless apart from the injected ports, so one instance can serve
    concurrent checkouts of different orders. Same-order races are
    resolved by ``OrderRepository.update_status``.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        payment_gateway: PaymentGateway,
        event_publisher: EventPublisher,
        clock: Clock,
    ):
        """
        Initialize use case with its ports.

        Args:
            order_repository: Loads orders and persists status
            payment_gateway: Charges the customer
            event_publisher: Emits order.paid
            clock: Source of the current time
        """
        self.order_repository = order_repository
        self.payment_gateway = payment_gateway
        self.event_publisher = event_publisher
        self.clock = clock

    async def execute(
        self,
        order_id: str,
        context: Optional[CheckoutContext] = None,
    ) -> CheckoutResult:
        """
        Run the checkout workflow for one order.

        Args:
            order_id: Opaque order identifier
            context: Optional tracing context (generated if missing)

        Returns:
            CheckoutResult (check ``publish_error`` for the non-fatal case)

        Raises:
            OrderNotFoundError: Unknown order
            InvalidStatusError: Order is not pending
            OrderExpiredError: Order is past its expiry
            PaymentFailedError: Charge failed, order still pending
            PostChargePersistenceFailedError: Charged but status not saved
            RepositoryError: Persistence failed before any charge
            CheckoutCancelled: The calling task was cancelled
        """
        context = context or CheckoutContext()
        execution_id = context.execution_id
        step = "find"
        charged = False

        logger.info(f"[{execution_id}] Starting checkout: {order_id}")

        try:
            # ================================================================
            # STEP 1: Load order
            # ================================================================
            logger.info(f"[{execution_id}] Step 1: Loading order")
            order = await self._find(order_id, execution_id)

            # ================================================================
            # STEP 2: Decide
            # ================================================================
            step = "decide"
            logger.info(f"[{execution_id}] Step 2: Deciding checkout")
            decision = self._decide(order, execution_id)

            # ================================================================
            # STEP 3: Charge
            # ================================================================
            if decision.need_charge:
                step = "charge"
                logger.info(
                    f"[{execution_id}] Step 3: Charging {order.amount} for order {order.order_id}"
                )
                await self._charge(order, execution_id)
                charged = True
            else:
                logger.info(f"[{execution_id}] Step 3: No charge required")

            # ================================================================
            # STEP 4: Persist status
            # ================================================================
            step = "update_status"
            logger.info(
                f"[{execution_id}] Step 4: Persisting status '{decision.next_status.value}'"
            )
            await self._persist_status(order, decision, charged, execution_id)

            # ================================================================
            # STEP 5: Publish (best-effort)
            # ================================================================
            step = "publish"
            logger.info(f"[{execution_id}] Step 5: Publishing {OrderPaidEvent.TOPIC}")
            publish_error = await self._publish(order, execution_id)

        except asyncio.CancelledError:
            logger.warning(
                f"[{execution_id}] Checkout of {order_id} cancelled during '{step}' "
                f"(charged: {charged})"
            )
            raise CheckoutCancelled(order_id, step, charged) from None

        logger.info(f"[{execution_id}] ✅ Checkout completed: {order_id}")

        return CheckoutResult(
            execution_id=execution_id,
            order_id=order.order_id,
            status=decision.next_status,
            charged=charged,
            completed_at=self.clock.now(),
            publish_error=publish_error,
        )

    async def _find(self, order_id: str, execution_id: ExecutionID) -> Order:
        try:
            order = await self.order_repository.find(order_id)
        except CheckoutError as e:
            logger.error(f"[{execution_id}] ❌ Order lookup failed: {e}")
            raise
        except Exception as e:
            logger.error(f"[{execution_id}] ❌ Order lookup failed: {e}", exc_info=True)
            raise RepositoryError(
                f"Failed to load order {order_id}: {e}", order_id=order_id
            ) from e

        logger.info(
            f"[{execution_id}] Order loaded: status={order.status.value}, amount={order.amount}"
        )
        return order

    def _decide(self, order: Order, execution_id: ExecutionID) -> CheckoutDecision:
        try:
            decision = order.decide_checkout(self.clock.now())
        except CheckoutError as e:
            logger.info(f"[{execution_id}] Checkout rejected: {e}")
            raise

        logger.info(
            f"[{execution_id}] Decision: next_status={decision.next_status.value}, "
            f"need_charge={decision.need_charge}"
        )
        return decision

    async def _charge(self, order: Order, execution_id: ExecutionID) -> None:
        try:
            await self.payment_gateway.charge(
                order.card_token,
                order.amount,
                idempotency_key=charge_idempotency_key(order.order_id, execution_id),
            )
        except PaymentFailedError as e:
            if e.order_id is None:
                e.order_id = order.order_id
            logger.error(f"[{execution_id}] ❌ Payment failed: {e}")
            raise
        except Exception as e:
            logger.error(f"[{execution_id}] ❌ Payment failed: {e}", exc_info=True)
            raise PaymentFailedError(
                f"Charge failed for order {order.order_id}: {e}",
                order_id=order.order_id,
            ) from e

        logger.info(f"[{execution_id}] ✅ Charge succeeded")

    async def _persist_status(
        self,
        order: Order,
        decision: CheckoutDecision,
        charged: bool,
        execution_id: ExecutionID,
    ) -> None:
        try:
            await self.order_repository.update_status(order.order_id, decision.next_status)
        except Exception as e:
            if charged:
                # Not retryable: a rerun would charge again
                logger.critical(
                    f"[{execution_id}] ❌ reconciliation_required: order {order.order_id} "
                    f"charged {order.amount} but status update failed: {e}"
                )
                raise PostChargePersistenceFailedError(
                    order.order_id, decision.next_status, order.amount, e
                ) from e

            logger.error(f"[{execution_id}] ❌ Status update failed: {e}")
            if isinstance(e, CheckoutError):
                raise
            raise RepositoryError(
                f"Failed to update order {order.order_id}: {e}",
                order_id=order.order_id,
            ) from e

        logger.info(f"[{execution_id}] ✅ Status persisted")

    async def _publish(
        self,
        order: Order,
        execution_id: ExecutionID,
    ) -> Optional[PublishFailedError]:
        event = OrderPaidEvent(
            order_id=order.order_id,
            execution_id=str(execution_id),
            occurred_at=self.clock.now(),
        )

        try:
            await self.event_publisher.publish(event.TOPIC, event.to_payload())
        except Exception as e:
            # Charge and status are committed; report, don't fail
            if isinstance(e, PublishFailedError):
                error = e
            else:
                error = PublishFailedError(
                    f"Failed to publish {event.TOPIC} for order {order.order_id}: {e}",
                    order_id=order.order_id,
                )
                error.__cause__ = e
            logger.warning(
                f"[{execution_id}] Event publish failed (non-critical): {error}"
            )
            return error

        logger.info(f"[{execution_id}] ✅ Event published: {event.to_dict()}")
        return None
