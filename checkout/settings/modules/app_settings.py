from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from checkout.settings.modules.checkout_settings import CheckoutSettings
from checkout.settings.modules.database_settings import DatabaseSettings
from checkout.settings.modules.payment_settings import PaymentSettings
from checkout.settings.modules.redis_settings import RedisSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    checkout: CheckoutSettings
    database: DatabaseSettings
    redis: RedisSettings
    payment: PaymentSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        checkout=CheckoutSettings(),
        database=DatabaseSettings(),
        redis=RedisSettings(),
        payment=PaymentSettings(),
    )
