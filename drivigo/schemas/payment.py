from typing import Any, Optional
from pydantic import BaseModel, validator

class OrderCreateRequest(BaseModel):
    amount: int  # Major currency units, converted to paise before reaching Razorpay
    currency: str

class OrderResponse(BaseModel):
    order_id: str
    currency: str
    amount: int  # Minor units as echoed by Razorpay

class PaymentVerificationRequest(BaseModel):
    payment_id: Optional[str] = None
    order_id: Optional[str] = None
    signature: Optional[str] = None

    @validator("payment_id", "order_id", "signature", pre=True)
    def numbers_as_text(cls, v: Any) -> Any:
        # Identifiers are signed as text, a numeric id is signed as its digits
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v
