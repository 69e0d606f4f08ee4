"""
Redis Streams Publisher.

Publishes checkout events to Redis Streams for reliable delivery
to downstream consumers.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import json
import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from checkout.application.interfaces import EventPublisher
from checkout.domain.exceptions import PublishFailedError
from checkout.settings.modules.redis_settings import RedisSettings


logger = logging.getLogger(__name__)


class RedisStreamPublisher(EventPublisher):
    """
    Publishes events to Redis Streams.
    
    Stream name: ``{stream_prefix}:{topic}`` (e.g. checkout:order.paid)
    Message format: {
        "topic": str,
        "payload": str,        # JSON-encoded payload
        "published_at": str,   # ISO format
    }
    """
    
    def __init__(
        self,
        settings: Optional[RedisSettings] = None,
        client: Optional[aioredis.Redis] = None,
    ):
        """
        Initialize Redis Stream Publisher.
        
        Args:
            settings: Redis settings (defaults loaded from env)
            client: Pre-built client (connect() is skipped when given)
        """
        self.settings = settings or RedisSettings()
        self._redis_client: Optional[aioredis.Redis] = client
    
    async def connect(self) -> None:
        """Establish Redis connection."""
        if self._redis_client is None:
            try:
                self._redis_client = aioredis.from_url(
                    self.settings.url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis_client.ping()
                logger.info(f"✅ Connected to Redis: {self.settings.url}")
            except RedisError as e:
                logger.error(f"Failed to connect to Redis: {e}")
                self._redis_client = None
                raise PublishFailedError(f"Failed to connect to Redis: {e}") from e
    
    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self._redis_client:
            await self._redis_client.aclose()
            self._redis_client = None
            logger.info("✅ Disconnected from Redis")
    
    def stream_name(self, topic: str) -> str:
        """Stream key used for ``topic``."""
        return f"{self.settings.stream_prefix}:{topic}"
    
    async def publish(self, topic: str, payload: Dict[str, Any]) -> None:
        """
        Append the payload to the topic's stream.
        
        Args:
            topic: Topic name
            payload: JSON-serializable message body
        
        Raises:
            PublishFailedError: On connection or command failure
        """
        if self._redis_client is None:
            await self.connect()
        
        message = {
            "topic": topic,
            "payload": json.dumps(payload),
            "published_at": datetime.now(timezone.utc).isoformat(),
        }
        
        try:
            msg_id = await self._redis_client.xadd(
                self.stream_name(topic),
                message,
                maxlen=self.settings.stream_maxlen,
                approximate=True,
            )
        except RedisError as e:
            logger.error(f"Failed to publish to Redis Stream: {e}", exc_info=True)
            raise PublishFailedError(f"Failed to publish {topic}: {e}") from e
        
        logger.info(f"✅ Published {topic}: {payload} (msg_id={msg_id})")
    
    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.disconnect()
