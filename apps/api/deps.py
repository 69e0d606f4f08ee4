"""FastAPI dependencies for dependency injection.

Builds the checkout use case from settings. Each port gets one
process-wide adapter instance; ``reset_dependencies`` drops them (tests).
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from checkout.application.interfaces import Clock, EventPublisher, PaymentGateway  # noqa: E402
from checkout.application.use_cases.checkout_order import CheckoutUseCase  # noqa: E402
from checkout.domain.repositories.order_repository import OrderRepository  # noqa: E402
from checkout.infrastructure.adapters.payments import (  # noqa: E402
    FakePaymentGateway,
    HttpPaymentGateway,
)
from checkout.infrastructure.adapters.persistence import InMemoryOrderRepository  # noqa: E402
from checkout.infrastructure.bus import InMemoryEventPublisher, RedisStreamPublisher  # noqa: E402
from checkout.infrastructure.clock import SystemClock  # noqa: E402
from checkout.settings import AppSettings, get_app_settings  # noqa: E402

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_order_repository: Optional[OrderRepository] = None
_payment_gateway: Optional[PaymentGateway] = None
_event_publisher: Optional[EventPublisher] = None
_clock: Optional[Clock] = None


def get_settings() -> AppSettings:
    """Get cached application settings."""
    return get_app_settings()


def get_order_repository() -> OrderRepository:
    """Get OrderRepository for the configured backend.

    Returns:
        InMemoryOrderRepository or SQLAlchemyOrderRepository
    """
    global _order_repository
    if _order_repository is None:
        backend = get_settings().checkout.repository_backend
        if backend == "sql":
            from checkout.infrastructure.database.config import get_session_factory
            from checkout.infrastructure.database.repositories import SQLAlchemyOrderRepository

            _order_repository = SQLAlchemyOrderRepository(get_session_factory())
        else:
            _order_repository = InMemoryOrderRepository()
        logger.info(f"Created {type(_order_repository).__name__} instance")
    return _order_repository


def get_payment_gateway() -> PaymentGateway:
    """Get PaymentGateway for the configured backend."""
    global _payment_gateway
    if _payment_gateway is None:
        settings = get_settings()
        if settings.checkout.payment_backend == "http":
            _payment_gateway = HttpPaymentGateway(settings.payment)
        else:
            _payment_gateway = FakePaymentGateway()
        logger.info(f"Created {type(_payment_gateway).__name__} instance")
    return _payment_gateway


def get_event_publisher() -> EventPublisher:
    """Get EventPublisher for the configured backend."""
    global _event_publisher
    if _event_publisher is None:
        settings = get_settings()
        if settings.checkout.publisher_backend == "redis":
            _event_publisher = RedisStreamPublisher(settings.redis)
        else:
            _event_publisher = InMemoryEventPublisher()
        logger.info(f"Created {type(_event_publisher).__name__} instance")
    return _event_publisher


def get_clock() -> Clock:
    """Get Clock instance."""
    global _clock
    if _clock is None:
        _clock = SystemClock()
    return _clock


def get_checkout_use_case(
    order_repository: OrderRepository = Depends(get_order_repository),
    payment_gateway: PaymentGateway = Depends(get_payment_gateway),
    event_publisher: EventPublisher = Depends(get_event_publisher),
    clock: Clock = Depends(get_clock),
) -> CheckoutUseCase:
    """Get CheckoutUseCase wired with the configured adapters.

    Returns:
        CheckoutUseCase instance
    """
    return CheckoutUseCase(
        order_repository=order_repository,
        payment_gateway=payment_gateway,
        event_publisher=event_publisher,
        clock=clock,
    )


def reset_dependencies() -> None:
    """Drop singleton adapters and cached settings."""
    global _order_repository, _payment_gateway, _event_publisher, _clock
    _order_repository = None
    _payment_gateway = None
    _event_publisher = None
    _clock = None
    get_app_settings.cache_clear()
