from __future__ import annotations

from typing import Literal

from pydantic_settings import SettingsConfigDict

from checkout.settings.base_settings import CheckoutBaseSettings


class CheckoutSettings(CheckoutBaseSettings):
    """
    Process-level settings: which adapter backs each port.

    CHECKOUT_ENVIRONMENT, CHECKOUT_LOG_LEVEL,
    CHECKOUT_REPOSITORY_BACKEND, CHECKOUT_PAYMENT_BACKEND, CHECKOUT_PUBLISHER_BACKEND
    """

    model_config = SettingsConfigDict(
        env_prefix="CHECKOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"
    log_level: str = "INFO"

    repository_backend: Literal["memory", "sql"] = "memory"
    payment_backend: Literal["fake", "http"] = "fake"
    publisher_backend: Literal["memory", "redis"] = "memory"
