"""
In-Memory Event Publisher (Infrastructure Layer).

Keeps published messages and notifies in-process subscribers.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple
import inspect
import logging

from checkout.application.interfaces import EventPublisher
from checkout.domain.exceptions import PublishFailedError


logger = logging.getLogger(__name__)


Subscriber = Callable[[str, Dict[str, Any]], Any]


class InMemoryEventPublisher(EventPublisher):
    """
    In-Memory EventPublisher implementation.
    
    Features:
    - Records every (topic, payload) in publish order
    - Notifies registered subscribers (sync or async callables)
    - Can be told to fail, to exercise the best-effort publish path
    
    Subscriber failures are logged and never fail the publish.
    """
    
    def __init__(self):
        """Initialize publisher with no messages or subscribers."""
        self.published: List[Tuple[str, Dict[str, Any]]] = []
        self._subscribers: List[Subscriber] = []
        self.fail_with: Optional[Exception] = None
    
    async def publish(self, topic: str, payload: Dict[str, Any]) -> None:
        """
        Record the message and notify subscribers.
        
        Args:
            topic: Topic name
            payload: Message body
        
        Raises:
            PublishFailedError: If configured to fail
        """
        if self.fail_with is not None:
            raise PublishFailedError(f"Failed to publish {topic}: {self.fail_with}") from self.fail_with
        
        logger.info(f"Publishing message on {topic}: {payload}")
        self.published.append((topic, dict(payload)))
        await self._notify_subscribers(topic, payload)
    
    def subscribe(self, handler: Subscriber) -> None:
        """
        Subscribe to all published messages.
        
        Args:
            handler: Callback receiving (topic, payload)
        """
        self._subscribers.append(handler)
        logger.info(f"Registered subscriber: {getattr(handler, '__name__', handler)}")
    
    def unsubscribe(self, handler: Subscriber) -> None:
        """Remove a subscriber (no-op if absent)."""
        if handler in self._subscribers:
            self._subscribers.remove(handler)
    
    def messages_for(self, topic: str) -> List[Dict[str, Any]]:
        """Payloads published on ``topic``, oldest first."""
        return [payload for t, payload in self.published if t == topic]
    
    def clear(self) -> None:
        """Forget published messages (for demo/testing)."""
        self.published.clear()
    
    async def _notify_subscribers(self, topic: str, payload: Dict[str, Any]) -> None:
        for subscriber in list(self._subscribers):
            try:
                if inspect.iscoroutinefunction(subscriber):
                    await subscriber(topic, payload)
                else:
                    subscriber(topic, payload)
            except Exception as e:
                logger.error(
                    f"Subscriber {getattr(subscriber, '__name__', subscriber)} failed: {e}",
                    exc_info=True,
                )
