import logging
from typing import Any, Dict, Optional

import razorpay  # type: ignore
from razorpay import errors as rp_errors  # type: ignore
from requests import exceptions as http_errors

from app.core.config import settings
from .base import PaymentsProvider, PaymentGatewayError

logger = logging.getLogger(__name__)

# razorpay-python drops the HTTP status and error code, only the description
# survives; the code is recovered from the error class
_ERROR_CODES = {
    rp_errors.BadRequestError: "BAD_REQUEST_ERROR",
    rp_errors.GatewayError: "GATEWAY_ERROR",
    rp_errors.ServerError: "SERVER_ERROR",
}


def _error_payload(exc: Exception) -> Dict[str, Any]:
    for cls, code in _ERROR_CODES.items():
        if isinstance(exc, cls):
            return {"error": {"code": code, "description": str(exc)}}
    return {"error": {"code": "NETWORK_ERROR", "description": str(exc)}}


class RazorpayPayments(PaymentsProvider):
    name = "razorpay"

    def __init__(self, key_id: Optional[str] = None, key_secret: Optional[str] = None, client: Any = None):
        self.key_id = key_id if key_id is not None else settings.RAZORPAY_KEY_ID
        self.key_secret = key_secret if key_secret is not None else settings.RAZORPAY_KEY_SECRET
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = razorpay.Client(auth=(self.key_id or "", self.key_secret or ""))
        return self._client

    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: Optional[str] = None,
        notes: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {"amount": amount, "currency": currency}
        # unset fields are left out of the request body rather than sent as null
        if receipt is not None:
            data["receipt"] = receipt
        if notes is not None:
            data["notes"] = notes

        try:
            return self.client.order.create(data=data)
        except (rp_errors.BadRequestError, rp_errors.GatewayError, rp_errors.ServerError) as e:
            payload = _error_payload(e)
            logger.warning(f"Razorpay rejected order for receipt {receipt}: {payload['error']['code']}")
            raise PaymentGatewayError(payload) from e
        except http_errors.RequestException as e:
            logger.error(f"Razorpay unreachable: {str(e)}")
            raise PaymentGatewayError(_error_payload(e)) from e

    def health_check(self) -> Dict[str, str]:
        """check gateway config status."""
        if not self.key_id:
            return {"status": "misconfigured", "reason": "missing_key_id", "provider": self.name}
        if not self.key_secret:
            return {"status": "misconfigured", "reason": "missing_key_secret", "provider": self.name}
        return {"status": "configured", "provider": self.name, "key_id": self.key_id[:8] + "..."}
