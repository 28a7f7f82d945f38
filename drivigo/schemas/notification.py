from typing import Any, Optional
from pydantic import BaseModel

class SubscriptionRequest(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None

class BookingDetails(BaseModel):
    # Sub-fields are rendered as received, nothing is validated here
    instructor_name: Optional[Any] = None
    session_plan: Optional[Any] = None
    start_date: Optional[Any] = None
    time_slots: Optional[Any] = None
    pickup_location: Optional[Any] = None

class PaymentReceiptRequest(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None
    booking_details: Optional[BookingDetails] = None
