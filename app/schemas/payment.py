"""
Payment and earning Pydantic schemas
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import Field, validator

from app.models.payment import PaymentStatus
from app.schemas.user import CamelModel


class PaymentCreate(CamelModel):
    """Manual payment record (advertiser id comes from the session)"""
    campaign_id: int
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    status: PaymentStatus = PaymentStatus.PENDING
    payment_method: str = Field(..., min_length=1, max_length=50)
    transaction_id: Optional[str] = Field(None, max_length=100)


class PaymentIntentCreate(CamelModel):
    """Amount is in major currency units; converted to the minor unit for the gateway"""
    campaign_id: int
    amount: Decimal = Field(..., gt=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)

    @validator('currency')
    def lowercase_currency(cls, v):
        return v.lower() if v else v


class PaymentProcess(CamelModel):
    """Charge confirmation; amount is already in the gateway's minor unit"""
    campaign_id: int
    amount: int = Field(..., gt=0)
    payment_method_id: str = Field(..., min_length=1)


class PaymentIntentResponse(CamelModel):
    client_secret: str


class PaymentProcessResponse(CamelModel):
    success: bool
    message: str
    payment_intent: Optional[str] = None


class PaymentResponse(CamelModel):
    id: int
    campaign_id: int
    advertiser_id: int
    amount: Decimal
    status: str
    payment_method: str
    transaction_id: Optional[str] = None
    processed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class PartnerEarningResponse(CamelModel):
    id: int
    partner_id: int
    campaign_id: int
    amount: Decimal
    status: str
    earned_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None
