import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.schemas.payments import CreateOrderRequest, VerifyPaymentRequest, VerifyPaymentResponse
from app.services.payments.base import PaymentsProvider, PaymentGatewayError, SignatureConfigError, verify_signature
from app.services.payments.factory import get_payments_provider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])


@router.post("/verify-payment", response_model=VerifyPaymentResponse)
def verify_payment(payload: VerifyPaymentRequest):
    """confirm a checkout signature before the purchase is marked complete."""
    try:
        ok = verify_signature(
            payload.razorpay_order_id,
            payload.razorpay_payment_id,
            payload.razorpay_signature,
            settings.RAZORPAY_KEY_SECRET,
        )
    except SignatureConfigError:
        logger.error("RAZORPAY_KEY_SECRET is not set, cannot verify payments")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Server configuration error (Missing Secret)"},
        )

    if not ok:
        logger.warning(f"Invalid payment signature for order {payload.razorpay_order_id}")
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Invalid payment signature"},
        )

    logger.info(f"Payment {payload.razorpay_payment_id} verified for order {payload.razorpay_order_id}")
    return VerifyPaymentResponse(success=True, message="Payment verified successfully")


@router.post("/create-order")
def create_order(payload: CreateOrderRequest, provider: PaymentsProvider = Depends(get_payments_provider)):
    """create a gateway order; the gateway's order or error object is returned as is."""
    try:
        order = provider.create_order(
            amount=payload.amount,
            currency=payload.currency or settings.DEFAULT_CURRENCY,
            receipt=payload.receipt,
            notes=payload.notes,
        )
    except PaymentGatewayError as e:
        return JSONResponse(status_code=500, content=e.payload)
    return order
