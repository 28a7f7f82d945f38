"""Shared fakes: a Razorpay client stand-in and a recording SMTP transport."""

import hashlib
import hmac
import time

import pytest
from fastapi.testclient import TestClient

from drivigo.core.config import Settings
from drivigo.core.mailer import SMTPMailer
from drivigo.main import create_app
from drivigo.services.email_service import NotificationService
from drivigo.services.payment_service import PaymentService


TEST_SECRET = "test_key_secret"


def sign_payment(secret, order_id, payment_id):
    """Signature as Razorpay checkout produces it."""
    message = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


class FakeOrderResource:
    def __init__(self, response=None, error=None, delay=0.0):
        self.response = response
        self.error = error
        self.delay = delay
        self.calls = []

    def create(self, data=None):
        self.calls.append(data)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response


class FakeRazorpayClient:
    def __init__(self, response=None, error=None, delay=0.0):
        self.order = FakeOrderResource(response=response, error=error, delay=delay)


class RecordingMailer(SMTPMailer):
    """SMTPMailer that records messages instead of opening a connection."""

    def __init__(self, error=None):
        super().__init__(host="smtp.test", port=587, username="noreply@drivigo.in", password="pw")
        self.error = error
        self.sent = []

    def send_html(self, to, subject, html):
        if self.error is not None:
            raise self.error
        self.sent.append({"to": to, "subject": subject, "html": html})


class SlowMailer(RecordingMailer):
    """Takes longer than the short timeouts used in tests."""

    def send_html(self, to, subject, html):
        time.sleep(0.5)
        super().send_html(to, subject, html)


@pytest.fixture
def settings():
    return Settings(
        RAZORPAY_KEY_ID="rzp_test_key",
        RAZORPAY_KEY_SECRET=TEST_SECRET,
        SMTP_HOST="smtp.test",
        SMTP_PORT=587,
        SMTP_USER="noreply@drivigo.in",
        CORS_ORIGINS="http://localhost:5173,https://drivigo.in",
    )


@pytest.fixture
def razorpay_client():
    return FakeRazorpayClient(response={
        "id": "order_abc",
        "entity": "order",
        "currency": "INR",
        "amount": 10000,
        "status": "created",
    })


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def payment_service(settings, razorpay_client):
    return PaymentService.from_settings(settings, client=razorpay_client)


@pytest.fixture
def notification_service(mailer):
    return NotificationService(mailer, timeout=5)


@pytest.fixture
def client(settings, payment_service, notification_service):
    app = create_app(
        settings=settings,
        payment_service=payment_service,
        notification_service=notification_service,
    )
    with TestClient(app) as test_client:
        yield test_client
