# checkout/settings/base_settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckoutBaseSettings(BaseSettings):
    """Common loading rules: environment first, then ``.env`` in the working directory."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
