import time
import uuid
from typing import Any, Dict, Optional

from .base import PaymentsProvider


class MockPayments(PaymentsProvider):
    """echoes order requests back in the gateway's order shape, for local dev and tests."""

    name = "mock"

    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: Optional[str] = None,
        notes: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        return {
            "id": f"order_{uuid.uuid4().hex[:14]}",
            "entity": "order",
            "amount": amount,
            "amount_paid": 0,
            "amount_due": amount,
            "currency": currency,
            "receipt": receipt,
            "notes": notes if notes is not None else [],
            "status": "created",
            "attempts": 0,
            "created_at": int(time.time()),
        }
