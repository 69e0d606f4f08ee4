"""Repository interface for Order entity."""

from abc import ABC, abstractmethod

from ..entities.order import Order
from ..enums import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for Order persistence."""

    @abstractmethod
    async def find(self, order_id: str) -> Order:
        """Retrieve order snapshot by identifier.

        Args:
            order_id: Opaque order identifier

        Returns:
            Order snapshot

        Raises:
            OrderNotFoundError: If no order has this identifier
            RepositoryError: If retrieval fails
        """
        pass

    @abstractmethod
    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        """Persist a new status for the order.

        Implementations must only succeed from a consistent prior state
        (the order is still pending) so two concurrent checkouts cannot
        both commit.

        Args:
            order_id: Opaque order identifier
            status: Status to persist

        Raises:
            ConflictError: If the stored order is no longer pending
            RepositoryError: If the update fails
        """
        pass
