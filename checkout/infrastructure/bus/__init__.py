"""Event publisher infrastructure - in-memory and Redis Streams."""
from .in_memory_event_publisher import InMemoryEventPublisher
from .redis_stream_publisher import RedisStreamPublisher

__all__ = [
    "InMemoryEventPublisher",
    "RedisStreamPublisher",
]
