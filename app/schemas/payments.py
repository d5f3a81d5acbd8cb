from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator


class VerifyPaymentRequest(BaseModel):
    razorpay_order_id: str = ""
    razorpay_payment_id: str = ""
    razorpay_signature: str = ""

    # a wrong-typed value is a signature mismatch (400), not a schema error
    @field_validator("razorpay_order_id", "razorpay_payment_id", "razorpay_signature", mode="before")
    @classmethod
    def _as_text(cls, v):
        if v is None:
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v


class VerifyPaymentResponse(BaseModel):
    success: bool
    message: str


class CreateOrderRequest(BaseModel):
    # amount/currency are checked by the gateway, not here
    amount: Any = None
    currency: Optional[str] = None
    receipt: Optional[str] = None
    notes: Optional[Dict[str, Any]] = None
