"""Payment gateway adapters."""
from .fake_payment_gateway import FakePaymentGateway
from .http_payment_gateway import HttpPaymentGateway

__all__ = ["FakePaymentGateway", "HttpPaymentGateway"]
