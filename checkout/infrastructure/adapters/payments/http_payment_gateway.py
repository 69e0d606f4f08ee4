"""
HTTP Payment Gateway Implementation.

Charges through a provider REST endpoint (``POST {base_url}/charges``).
"""
from typing import Dict, Optional
from uuid import uuid4
import asyncio
import logging

import aiohttp

from checkout.application.interfaces import PaymentGateway
from checkout.domain.exceptions import PaymentFailedError
from checkout.settings.modules.payment_settings import PaymentSettings


logger = logging.getLogger(__name__)

IDEMPOTENCY_HEADER = "Idempotency-Key"


class HttpPaymentGateway(PaymentGateway):
    """
    aiohttp implementation of PaymentGateway.

    Request body: {"source": card_token, "amount": amount, "currency": currency}
    Every request carries an Idempotency-Key header (random when the caller
    gives none).
    Any non-2xx response or transport error raises PaymentFailedError.
    """

    def __init__(self, settings: PaymentSettings):
        """
        Initialize HTTP payment gateway.

        Args:
            settings: Payment settings with base URL, key and timeout
        """
        self.settings = settings
        self.charge_url = f"{settings.base_url.rstrip('/')}/charges"
        self.timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)
        logger.info(f"HttpPaymentGateway initialized: {self.charge_url}")

    async def charge(
        self,
        card_token: str,
        amount: int,
        idempotency_key: Optional[str] = None,
    ) -> None:
        payload = {
            "source": card_token,
            "amount": amount,
            "currency": self.settings.currency,
        }

        try:
            async with aiohttp.ClientSession(
                timeout=self.timeout, headers=self._headers(idempotency_key or str(uuid4()))
            ) as session:
                async with session.post(self.charge_url, json=payload) as response:
                    if response.status >= 300:
                        error_text = await response.text()
                        logger.error(
                            f"Payment API error: {response.status} - {error_text}"
                        )
                        raise PaymentFailedError(
                            f"Payment provider returned {response.status}: {error_text}"
                        )
                    logger.info(f"Charge of {amount} {self.settings.currency} accepted")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Payment request failed: {e}")
            raise PaymentFailedError(f"Payment request failed: {e}") from e

    def _headers(self, idempotency_key: str) -> Dict[str, str]:
        headers = {IDEMPOTENCY_HEADER: idempotency_key}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"
        return headers
