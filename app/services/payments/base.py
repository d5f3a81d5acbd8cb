from typing import Any, Dict, Optional
import hmac
import hashlib


class SignatureConfigError(RuntimeError):
    """raised when the signing secret is missing (server misconfigured, not a bad signature)."""


class PaymentGatewayError(Exception):
    """gateway call failed; `payload` is the gateway's error object, passed on untouched."""

    def __init__(self, payload: Dict[str, Any]):
        super().__init__(payload.get("error", {}).get("description") or "payment gateway error")
        self.payload = payload


def expected_signature(order_id: str, payment_id: str, secret: Optional[str]) -> str:
    """hex HMAC-SHA256 of "<order_id>|<payment_id>" keyed by the gateway secret."""
    if not secret:
        raise SignatureConfigError("payment signing secret is not configured")
    message = f"{order_id}|{payment_id}"
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_signature(order_id: str, payment_id: str, signature: str, secret: Optional[str]) -> bool:
    """
    Check a checkout signature returned by the gateway.

    Identifiers go into the digest exactly as received. The comparison is
    constant time and case sensitive, so an uppercase hex digest or a
    truncated one is rejected.

    Raises:
        SignatureConfigError: secret is empty or missing
    """
    computed = expected_signature(order_id, payment_id, secret)
    return hmac.compare_digest(computed.encode("utf-8"), (signature or "").encode("utf-8"))


class PaymentsProvider:
    """base payments provider interface."""

    name = "base"

    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: Optional[str] = None,
        notes: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:  # pragma: no cover
        raise NotImplementedError

    def health_check(self) -> Dict[str, str]:  # pragma: no cover
        return {"status": "configured", "provider": self.name}
