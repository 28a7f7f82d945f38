import asyncio
import razorpay
import logging
from typing import Any, Optional
from drivigo.core.config import Settings
from drivigo.core.exceptions import ProviderError, VerificationMismatch
from drivigo.core.security import verify_payment_signature
from drivigo.schemas.payment import OrderResponse

logger = logging.getLogger(__name__)

PAISE_PER_RUPEE = 100

class PaymentService:
    def __init__(
        self,
        key_id: str = "",
        key_secret: str = "",
        client: Optional[Any] = None,
        receipt: str = "order_rcptid_11",
        course_note: str = "Master Gen-AI Development",
        timeout: float = 15.0,
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self.receipt = receipt
        self.course_note = course_note
        self.timeout = timeout

        if client is not None:
            self.client = client
        elif self.key_id and self.key_secret:
            self.client = razorpay.Client(auth=(self.key_id, self.key_secret))
        else:
            self.client = None
            logger.warning("Razorpay keys not set. Payment operations will fail.")

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[Any] = None) -> "PaymentService":
        return cls(
            key_id=settings.RAZORPAY_KEY_ID,
            key_secret=settings.RAZORPAY_KEY_SECRET,
            client=client,
            receipt=settings.ORDER_RECEIPT,
            course_note=settings.ORDER_COURSE_NOTE,
            timeout=settings.PROVIDER_TIMEOUT_SECONDS,
        )

    async def create_order(self, amount: int, currency: str) -> OrderResponse:
        """
        Creates a Razorpay order for `amount` major units of `currency`.

        Only id, currency and amount of the provider's order are relayed.
        Raises ProviderError on any upstream failure or when the call does not
        finish within the configured timeout.
        """
        if not self.client:
            raise ProviderError("Razorpay client not initialized")

        data = {
            "amount": amount * PAISE_PER_RUPEE,
            "currency": currency,
            "receipt": self.receipt,
            "notes": {
                "course": self.course_note,
            },
        }

        try:
            order = await asyncio.wait_for(
                asyncio.to_thread(self.client.order.create, data=data),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"Razorpay order creation timed out after {self.timeout}s")
            raise ProviderError("Razorpay order creation timed out")
        except Exception as e:
            logger.error(f"Error creating Razorpay order: {e}")
            raise ProviderError(str(e)) from e

        logger.info(f"Razorpay order created: {order}")

        try:
            return OrderResponse(
                order_id=order["id"],
                currency=order["currency"],
                amount=order["amount"],
            )
        except Exception as e:
            logger.error(f"Unexpected Razorpay order response {order}: {e}")
            raise ProviderError("Malformed Razorpay order response") from e

    def verify_payment(self, order_id: Optional[str], payment_id: Optional[str], signature: Optional[str]) -> None:
        if not verify_payment_signature(self.key_secret, order_id, payment_id, signature):
            logger.warning(f"Payment signature mismatch for order {order_id}")
            raise VerificationMismatch("Payment verification failed")

        logger.info(f"Payment verification successful for order {order_id}, payment {payment_id}")
