from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from drivigo.api.deps import get_notification_service
from drivigo.core.exceptions import DeliveryError, ValidationError
from drivigo.schemas.common import ErrorResponse, MessageResponse
from drivigo.schemas.notification import PaymentReceiptRequest, SubscriptionRequest
from drivigo.services.email_service import NotificationService

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post("/subscribe", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def subscribe(
    request: SubscriptionRequest,
    service: NotificationService = Depends(get_notification_service),
):
    """
    Send the subscription confirmation email.
    """
    try:
        await service.send_subscription_email(request.email, request.name)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except DeliveryError:
        return JSONResponse(status_code=500, content={"error": "Failed to send confirmation email."})
    return MessageResponse(message="Subscription confirmation email sent.")


@router.post("/payment-success-email", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def payment_success_email(
    request: PaymentReceiptRequest,
    service: NotificationService = Depends(get_notification_service),
):
    """
    Send the payment and booking receipt email.
    """
    try:
        await service.send_payment_receipt_email(request.email, request.name, request.booking_details)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except DeliveryError:
        return JSONResponse(status_code=500, content={"error": "Failed to send payment receipt email."})
    return MessageResponse(message="Payment & booking email sent.")
