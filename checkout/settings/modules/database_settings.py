from __future__ import annotations

from pydantic_settings import SettingsConfigDict

from checkout.settings.base_settings import CheckoutBaseSettings


class DatabaseSettings(CheckoutBaseSettings):
    """
    Database configuration settings.

    DB_DATABASE_URL, DB_ECHO_SQL
    """

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///checkout.db"
    echo_sql: bool = False
