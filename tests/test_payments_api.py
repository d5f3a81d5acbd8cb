import hashlib
import hmac

import pytest

from app.core.config import settings
from app.services.payments.base import PaymentGatewayError
from app.services.payments.factory import _provider_for, get_payments_provider
from app.services.payments.mock import MockPayments


def _sign(order_id, payment_id, secret):
    return hmac.new(secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()


def test_verify_payment_success(client, signing_secret):
    payload = {
        "razorpay_order_id": "order_ABC",
        "razorpay_payment_id": "pay_XYZ",
        "razorpay_signature": _sign("order_ABC", "pay_XYZ", signing_secret),
    }
    response = client.post("/verify-payment", json=payload)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Payment verified successfully"}


def test_verify_payment_invalid_signature(client, signing_secret):
    payload = {
        "razorpay_order_id": "order_ABC",
        "razorpay_payment_id": "pay_XYZ",
        "razorpay_signature": "0" * 64,
    }
    response = client.post("/verify-payment", json=payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid payment signature"}


@pytest.mark.parametrize("secret", [None, ""])
def test_verify_payment_missing_secret(client, monkeypatch, secret):
    monkeypatch.setattr(settings, "RAZORPAY_KEY_SECRET", secret)
    payload = {
        "razorpay_order_id": "order_ABC",
        "razorpay_payment_id": "pay_XYZ",
        "razorpay_signature": _sign("order_ABC", "pay_XYZ", "s3cr3t"),
    }
    response = client.post("/verify-payment", json=payload)

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server configuration error (Missing Secret)"}


def test_verify_payment_missing_fields_are_a_mismatch(client, signing_secret):
    response = client.post("/verify-payment", json={"razorpay_signature": "abc"})

    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.parametrize(
    "field,value",
    [
        ("razorpay_signature", 123),
        ("razorpay_order_id", 42),
        ("razorpay_payment_id", 1.5),
        ("razorpay_signature", True),
    ],
)
def test_verify_payment_non_string_values_are_a_mismatch(client, signing_secret, field, value):
    payload = {
        "razorpay_order_id": "order_ABC",
        "razorpay_payment_id": "pay_XYZ",
        "razorpay_signature": _sign("order_ABC", "pay_XYZ", signing_secret),
    }
    payload[field] = value

    response = client.post("/verify-payment", json=payload)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid payment signature"}


def test_verify_payment_numeric_ids_are_signed_as_text(client, signing_secret):
    payload = {
        "razorpay_order_id": 1001,
        "razorpay_payment_id": 2002,
        "razorpay_signature": _sign("1001", "2002", signing_secret),
    }

    response = client.post("/verify-payment", json=payload)

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_create_order_echoes_input(client):
    client.app.dependency_overrides[get_payments_provider] = lambda: MockPayments()
    payload = {"amount": 49900, "currency": "INR", "receipt": "rcpt_42", "notes": {"event": "evt_7", "seats": "A1,A2"}}

    response = client.post("/create-order", json=payload)

    assert response.status_code == 200
    order = response.json()
    assert order["id"].startswith("order_")
    assert order["amount"] == 49900
    assert order["currency"] == "INR"
    assert order["receipt"] == "rcpt_42"
    assert order["notes"] == {"event": "evt_7", "seats": "A1,A2"}


def test_create_order_defaults_currency(client, mocker):
    provider = mocker.Mock()
    provider.create_order.return_value = {"id": "order_1"}
    client.app.dependency_overrides[get_payments_provider] = lambda: provider

    response = client.post("/create-order", json={"amount": 100, "receipt": "r1"})

    assert response.status_code == 200
    assert response.json() == {"id": "order_1"}
    provider.create_order.assert_called_once_with(amount=100, currency="INR", receipt="r1", notes=None)


def test_create_order_does_not_validate_amount(client, mocker):
    provider = mocker.Mock()
    provider.create_order.return_value = {"id": "order_2"}
    client.app.dependency_overrides[get_payments_provider] = lambda: provider

    response = client.post("/create-order", json={"amount": "not-a-number", "currency": "XYZ"})

    assert response.status_code == 200
    provider.create_order.assert_called_once_with(amount="not-a-number", currency="XYZ", receipt=None, notes=None)


def test_create_order_gateway_error_passed_through(client, mocker):
    error = {"error": {"code": "BAD_REQUEST_ERROR", "description": "The amount must be atleast INR 1.00"}}
    provider = mocker.Mock()
    provider.create_order.side_effect = PaymentGatewayError(error)
    client.app.dependency_overrides[get_payments_provider] = lambda: provider

    response = client.post("/create-order", json={"amount": 0, "currency": "INR", "receipt": "r0"})

    assert response.status_code == 500
    assert response.json() == error


def test_factory_selects_provider(monkeypatch):
    monkeypatch.setattr(settings, "PAYMENTS_PROVIDER", "mock")
    assert get_payments_provider().name == "mock"
    monkeypatch.setattr(settings, "PAYMENTS_PROVIDER", "razorpay")
    assert get_payments_provider().name == "razorpay"


def test_provider_is_reused_across_requests(monkeypatch, mocker):
    monkeypatch.setattr(settings, "PAYMENTS_PROVIDER", "razorpay")
    _provider_for.cache_clear()
    client_cls = mocker.patch("app.services.payments.razorpay_provider.razorpay.Client")

    first = get_payments_provider()
    first.create_order(amount=100, currency="INR")
    second = get_payments_provider()
    second.create_order(amount=200, currency="INR")

    assert first is second
    assert client_cls.call_count == 1
    _provider_for.cache_clear()
