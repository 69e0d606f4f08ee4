"""
Configurable fake payment gateway for development and testing.

Simulates a payment provider without any external calls. It can be
configured at runtime to succeed or fail.
"""
from typing import Any, Dict, List, Optional
import logging

from checkout.application.interfaces import PaymentGateway
from checkout.domain.exceptions import PaymentFailedError


logger = logging.getLogger(__name__)


class FakePaymentGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self, should_succeed: bool = True, failure_reason: str = "Card declined"):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.calls: List[Dict[str, Any]] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Card declined") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    async def charge(
        self,
        card_token: str,
        amount: int,
        idempotency_key: Optional[str] = None,
    ) -> None:
        self.calls.append({"method": "charge", "card_token": card_token, "amount": amount})

        if not self.should_succeed:
            logger.info(f"Fake gateway declined charge of {amount}: {self.failure_reason}")
            raise PaymentFailedError(self.failure_reason)

        logger.info(f"Fake gateway charged {amount}")
