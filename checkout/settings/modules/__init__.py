# Settings modules
from .app_settings import AppSettings, get_app_settings
from .checkout_settings import CheckoutSettings
from .database_settings import DatabaseSettings
from .payment_settings import PaymentSettings
from .redis_settings import RedisSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "CheckoutSettings",
    "DatabaseSettings",
    "PaymentSettings",
    "RedisSettings",
]
