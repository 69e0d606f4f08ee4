from __future__ import annotations

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from checkout.settings.base_settings import CheckoutBaseSettings


class RedisSettings(CheckoutBaseSettings):
    """
    Redis Streams settings for the event publisher.

    Stream name for a topic is ``{stream_prefix}:{topic}``.
    """

    model_config = SettingsConfigDict(
        env_prefix="REDIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = "redis://localhost:6379/0"
    stream_prefix: str = "checkout"
    stream_maxlen: int = Field(default=10000, gt=0)
