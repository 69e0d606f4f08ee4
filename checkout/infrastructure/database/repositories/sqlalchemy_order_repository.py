"""
SQLAlchemy Order Repository Implementation.

Implements OrderRepository using SQLAlchemy async sessions.
"""
from datetime import timezone
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from checkout.domain.entities.order import Order
from checkout.domain.enums import OrderStatus
from checkout.domain.exceptions import ConflictError, OrderNotFoundError, RepositoryError
from checkout.domain.repositories.order_repository import OrderRepository
from checkout.infrastructure.database.models import OrderModel


logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository.

    Each call runs in its own session. ``update_status`` is a conditional
    UPDATE (``WHERE status = 'pending'``) so only one of several
    concurrent checkouts of the same order can commit.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def find(self, order_id: str) -> Order:
        """
        Get order by ID.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order entity

        Raises:
            OrderNotFoundError: If no row has this ID
            RepositoryError: On database failure
        """
        logger.info(f"Getting order: {order_id}")

        try:
            async with self.session_factory() as session:
                order_model = await session.get(OrderModel, order_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load order {order_id}: {e}")
            raise RepositoryError(f"Failed to load order {order_id}: {e}", order_id=order_id) from e

        if order_model is None:
            logger.info(f"Order not found: {order_id}")
            raise OrderNotFoundError(order_id)

        logger.info(f"✅ Found order: {order_id}")
        return self._to_domain_entity(order_model)

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        """
        Set status, only if the stored order is still pending.

        Args:
            order_id: Order ID to update
            status: New status

        Raises:
            OrderNotFoundError: If no row has this ID
            ConflictError: If the row exists but is no longer pending
            RepositoryError: On database failure
        """
        logger.info(f"Updating order status: {order_id} -> {status.value}")

        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    update(OrderModel)
                    .where(
                        OrderModel.order_id == order_id,
                        OrderModel.status == OrderStatus.PENDING.value,
                    )
                    .values(status=status.value)
                )

                if result.rowcount == 1:
                    await session.commit()
                    logger.info(f"✅ Updated order status: {order_id} -> {status.value}")
                    return

                current_status = await session.scalar(
                    select(OrderModel.status).where(OrderModel.order_id == order_id)
                )
        except SQLAlchemyError as e:
            logger.error(f"Failed to update order {order_id}: {e}")
            raise RepositoryError(f"Failed to update order {order_id}: {e}", order_id=order_id) from e

        if current_status is None:
            raise OrderNotFoundError(order_id)

        logger.warning(
            f"Status conflict for {order_id}: stored '{current_status}', requested '{status.value}'"
        )
        raise ConflictError(
            f"Order {order_id} is '{current_status}', expected 'pending'",
            order_id=order_id,
        )

    async def add(self, order: Order) -> None:
        """
        Insert or overwrite an order row (seeding for tests/demos).

        Args:
            order: Order entity to store
        """
        try:
            async with self.session_factory() as session:
                await session.merge(self._to_model(order))
                await session.commit()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to save order {order.order_id}: {e}", order_id=order.order_id) from e

        logger.info(f"✅ Saved order: {order.order_id}")

    @staticmethod
    def _to_domain_entity(model: OrderModel) -> Order:
        """Convert ORM row to domain entity."""
        expire_at = model.expire_at
        if expire_at.tzinfo is None:
            # SQLite returns naive datetimes; rows are written in UTC
            expire_at = expire_at.replace(tzinfo=timezone.utc)

        return Order(
            order_id=model.order_id,
            status=OrderStatus(model.status),
            amount=int(model.amount),
            expire_at=expire_at,
            card_token=model.card_token or "",
        )

    @staticmethod
    def _to_model(order: Order) -> OrderModel:
        """Convert domain entity to ORM row."""
        return OrderModel(
            order_id=order.order_id,
            status=order.status.value,
            amount=order.amount,
            expire_at=order.expire_at.astimezone(timezone.utc),
            card_token=order.card_token,
        )
