"""
In-Memory Order Repository Implementation.

Dictionary-backed implementation for testing and demos.
"""
from dataclasses import replace
from typing import Dict, List
import asyncio
import logging

from checkout.domain.entities.order import Order
from checkout.domain.enums import OrderStatus
from checkout.domain.exceptions import ConflictError, OrderNotFoundError
from checkout.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    ``update_status`` is a compare-and-swap: it only succeeds while the
    stored order is pending, so concurrent checkouts of one order cannot
    both commit.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, Order] = {}
        self._lock = asyncio.Lock()
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    def add(self, order: Order) -> None:
        """
        Store an order (seeding for tests/demos).

        Args:
            order: Order snapshot to store
        """
        self._storage[order.order_id] = order
        logger.debug(f"Order stored: {order.order_id} (status: {order.status.value})")

    async def find(self, order_id: str) -> Order:
        """
        Get order by ID from in-memory storage.

        Args:
            order_id: Order ID to lookup

        Returns:
            Stored order snapshot

        Raises:
            OrderNotFoundError: If the ID is unknown
        """
        order = self._storage.get(order_id)

        if order is None:
            logger.info(f"Order not found in memory repository: {order_id}")
            raise OrderNotFoundError(order_id)

        logger.info(f"Order found in memory repository: {order_id}")
        return order

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        """
        Replace the stored snapshot with one carrying ``status``.

        Args:
            order_id: Order ID to update
            status: New status

        Raises:
            OrderNotFoundError: If the ID is unknown
            ConflictError: If the stored order is no longer pending
        """
        async with self._lock:
            current = self._storage.get(order_id)
            if current is None:
                raise OrderNotFoundError(order_id)

            if current.status != OrderStatus.PENDING:
                logger.warning(
                    f"Status conflict for {order_id}: stored '{current.status.value}', "
                    f"requested '{status.value}'"
                )
                raise ConflictError(
                    f"Order {order_id} is '{current.status.value}', expected 'pending'",
                    order_id=order_id,
                )

            self._storage[order_id] = replace(current, status=status)

        logger.info(f"Order status updated in memory repository: {order_id} -> {status.value}")

    def get_all(self) -> List[Order]:
        """
        Get all orders (for demo/testing).

        Returns:
            List of all orders
        """
        return list(self._storage.values())

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        self._storage.clear()
        logger.info("In-memory repository cleared")
