import asyncio
import logging
from typing import Optional
from drivigo.core.exceptions import DeliveryError, ValidationError
from drivigo.core.mailer import SMTPMailer
from drivigo.schemas.notification import BookingDetails
from drivigo.services.email_templates import (
    PAYMENT_RECEIPT_SUBJECT,
    SUBSCRIPTION_SUBJECT,
    render_payment_receipt_email,
    render_subscription_email,
)

logger = logging.getLogger(__name__)

class NotificationService:
    """
    Sends the two transactional emails through the shared SMTP transport.

    Each successful call delivers exactly one message; failed sends are logged
    and surfaced as DeliveryError, never queued or retried.
    """

    def __init__(self, mailer: SMTPMailer, timeout: float = 30.0):
        self.mailer = mailer
        self.timeout = timeout

    async def send_subscription_email(self, email: Optional[str], name: Optional[str]) -> None:
        if not email:
            raise ValidationError("Missing email")

        html = render_subscription_email(name)
        await self._deliver(email, SUBSCRIPTION_SUBJECT, html)

    async def send_payment_receipt_email(
        self,
        email: Optional[str],
        name: Optional[str],
        booking_details: Optional[BookingDetails],
    ) -> None:
        if not email or booking_details is None:
            raise ValidationError("Missing required email or booking details")

        html = render_payment_receipt_email(name, booking_details)
        await self._deliver(email, PAYMENT_RECEIPT_SUBJECT, html)

    async def _deliver(self, to: str, subject: str, html: str) -> None:
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self.mailer.send_html, to, subject, html),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"SMTP error: sending to {to} timed out after {self.timeout}s")
            raise DeliveryError("SMTP send timed out")
        except Exception as e:
            logger.error(f"SMTP error: {e}")
            raise DeliveryError(str(e)) from e
