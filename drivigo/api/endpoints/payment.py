from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from drivigo.api.deps import get_payment_service
from drivigo.core.exceptions import ProviderError, VerificationMismatch
from drivigo.schemas.payment import OrderCreateRequest, OrderResponse, PaymentVerificationRequest
from drivigo.services.payment_service import PaymentService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/create-order", response_model=OrderResponse)
async def create_order(
    request: OrderCreateRequest,
    service: PaymentService = Depends(get_payment_service),
):
    """
    Create a Razorpay order for payment.

    Accepts: amount (rupees), currency
    Returns: order_id, currency, amount (paise)
    """
    try:
        return await service.create_order(request.amount, request.currency)
    except ProviderError as e:
        logger.error(f"Failed to create order: {str(e)}")
        return PlainTextResponse("Error creating Razorpay order", status_code=500)


@router.post("/verify-payment", response_class=PlainTextResponse)
async def verify_payment(
    request: PaymentVerificationRequest,
    service: PaymentService = Depends(get_payment_service),
):
    """
    Verify the signature Razorpay checkout returned for a completed payment.
    """
    try:
        service.verify_payment(request.order_id, request.payment_id, request.signature)
    except VerificationMismatch:
        return PlainTextResponse("Payment verification failed", status_code=400)
    return PlainTextResponse("Payment verification successful")
