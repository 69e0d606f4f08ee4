"""Pytest configuration and fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from apps.api.deps import (
    get_clock,
    get_event_publisher,
    get_order_repository,
    get_payment_gateway,
)
from apps.api.main import app


@pytest.fixture
def test_client(order_repository, payment_gateway, event_publisher, clock) -> TestClient:
    """Create FastAPI test client wired to in-memory adapters."""
    app.dependency_overrides[get_order_repository] = lambda: order_repository
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway
    app.dependency_overrides[get_event_publisher] = lambda: event_publisher
    app.dependency_overrides[get_clock] = lambda: clock

    client = TestClient(app)
    yield client

    # Cleanup
    app.dependency_overrides.clear()
