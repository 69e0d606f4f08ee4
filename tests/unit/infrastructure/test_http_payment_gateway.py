"""Tests for HttpPaymentGateway against a local aiohttp test server."""

import asyncio

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp import test_utils

from checkout.domain.exceptions import PaymentFailedError
from checkout.infrastructure.adapters.payments import FakePaymentGateway, HttpPaymentGateway
from checkout.settings.modules.payment_settings import PaymentSettings


class FakeProvider:
    """Minimal payment provider: records requests, answers with a set status."""

    def __init__(self) -> None:
        self.requests: list[dict] = []
        self.status = 201
        self.delay = 0.0

    async def charges(self, request: web.Request) -> web.Response:
        self.requests.append(
            {
                "body": await request.json(),
                "authorization": request.headers.get("Authorization"),
                "idempotency_key": request.headers.get("Idempotency-Key"),
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.status >= 300:
            return web.json_response({"error": "card_declined"}, status=self.status)
        return web.json_response({"id": "ch_1", "status": "succeeded"}, status=self.status)


@pytest_asyncio.fixture
async def provider():
    fake = FakeProvider()
    app = web.Application()
    app.router.add_post("/charges", fake.charges)

    async with test_utils.TestServer(app) as server:
        fake.base_url = str(server.make_url(""))
        yield fake


def _gateway(provider, **overrides) -> HttpPaymentGateway:
    settings = PaymentSettings(base_url=provider.base_url, **overrides)
    return HttpPaymentGateway(settings)


@pytest.mark.asyncio
async def test_charge_posts_amount_and_source(provider):
    gateway = _gateway(provider, api_key="sk_test", currency="USD")

    await gateway.charge("tok_visa", 1000)

    assert len(provider.requests) == 1
    request = provider.requests[0]
    assert request["body"] == {"source": "tok_visa", "amount": 1000, "currency": "USD"}
    assert request["authorization"] == "Bearer sk_test"


@pytest.mark.asyncio
async def test_charge_without_api_key_sends_no_authorization(provider):
    await _gateway(provider).charge("tok_visa", 500)

    assert provider.requests[0]["authorization"] is None


@pytest.mark.asyncio
async def test_declined_charge_raises_payment_failed(provider):
    provider.status = 402

    with pytest.raises(PaymentFailedError, match="402"):
        await _gateway(provider).charge("tok_declined", 1000)


@pytest.mark.asyncio
async def test_timeout_raises_payment_failed(provider):
    provider.delay = 0.5
    gateway = _gateway(provider, timeout_seconds=0.05)

    with pytest.raises(PaymentFailedError):
        await gateway.charge("tok_visa", 1000)


@pytest.mark.asyncio
async def test_unreachable_provider_raises_payment_failed():
    settings = PaymentSettings(base_url="http://127.0.0.1:1", timeout_seconds=1)

    with pytest.raises(PaymentFailedError):
        await HttpPaymentGateway(settings).charge("tok_visa", 1000)


@pytest.mark.asyncio
async def test_fake_gateway_records_and_declines():
    gateway = FakePaymentGateway(should_succeed=False, failure_reason="Insufficient funds")

    with pytest.raises(PaymentFailedError, match="Insufficient funds"):
        await gateway.charge("tok_visa", 1000)

    assert gateway.calls == [{"method": "charge", "card_token": "tok_visa", "amount": 1000}]


@pytest.mark.asyncio
async def test_charge_sends_idempotency_key(provider):
    await _gateway(provider).charge("tok_visa", 1000, idempotency_key="checkout:order-1:abc")

    assert provider.requests[0]["idempotency_key"] == "checkout:order-1:abc"


@pytest.mark.asyncio
async def test_charge_without_key_still_sends_one(provider):
    gateway = _gateway(provider)

    await gateway.charge("tok_visa", 1000)
    await gateway.charge("tok_visa", 1000)

    first, second = (r["idempotency_key"] for r in provider.requests)
    assert first and second
    assert first != second
