from fastapi import Request
from drivigo.services.email_service import NotificationService
from drivigo.services.payment_service import PaymentService

# The Razorpay client and the SMTP transport are built once in create_app()
# and parked on app.state; routes reach them through these dependencies so
# tests can swap in fakes.

def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service

def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notification_service
