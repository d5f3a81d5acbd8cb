from functools import lru_cache

from app.core.config import settings
from .base import PaymentsProvider
from .mock import MockPayments
from .razorpay_provider import RazorpayPayments


@lru_cache(maxsize=None)
def _provider_for(name: str) -> PaymentsProvider:
    # one instance per provider, so the razorpay HTTP session is reused across requests
    if name == "mock":
        return MockPayments()
    return RazorpayPayments()


def get_payments_provider() -> PaymentsProvider:
    return _provider_for((settings.PAYMENTS_PROVIDER or "razorpay").lower())
