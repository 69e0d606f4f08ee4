"""Application layer interfaces (ports consumed by the checkout use case)."""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional


class PaymentGateway(ABC):
    """
    Interface for charging a customer.

    This interface defines the contract for payment processing,
    allowing the application layer to charge an order without
    depending on a specific payment provider.
    """

    @abstractmethod
    async def charge(
        self,
        card_token: str,
        amount: int,
        idempotency_key: Optional[str] = None,
    ) -> None:
        """
        Charge the payment reference.

        Args:
            card_token: Opaque payment reference taken from the order
            amount: Amount in minor currency units
            idempotency_key: Key the provider uses to collapse repeated requests

        Raises:
            PaymentFailedError: If the charge is rejected or errors
        """
        pass


class EventPublisher(ABC):
    """
    Interface for emitting integration events.

    Implementations may target an in-process bus, Redis Streams,
    or any other message transport.
    """

    @abstractmethod
    async def publish(self, topic: str, payload: Dict[str, Any]) -> None:
        """
        Publish a payload on a topic.

        Args:
            topic: Topic name (e.g. "order.paid")
            payload: JSON-serializable message body

        Raises:
            PublishFailedError: If the message could not be emitted
        """
        pass


class Clock(ABC):
    """Source of the current time, injected so tests can control it."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware UTC datetime."""
        pass


__all__ = ["PaymentGateway", "EventPublisher", "Clock"]
