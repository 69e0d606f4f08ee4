from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from checkout.settings.base_settings import CheckoutBaseSettings


class PaymentSettings(CheckoutBaseSettings):
    """
    Payment provider settings for the HTTP gateway.

    PAYMENT_BASE_URL, PAYMENT_API_KEY, PAYMENT_TIMEOUT_SECONDS, PAYMENT_CURRENCY
    """

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = "http://localhost:8081"
    api_key: Optional[str] = None
    timeout_seconds: float = Field(default=10.0, gt=0)
    currency: str = Field(default="JPY", min_length=3, max_length=3)
