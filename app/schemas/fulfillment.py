"""
Sample product and shipping record schemas
"""

from datetime import datetime
from typing import Optional, List, Dict, Any
from pydantic import Field, validator

from app.models.fulfillment import SampleStatus, ShippingStatus
from app.schemas.user import CamelModel
from app.utils.dates import to_naive_utc


class SampleProductCreate(CamelModel):
    campaign_id: int
    product_name: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(..., ge=1)


class SampleStatusUpdate(CamelModel):
    status: SampleStatus
    tracking_number: Optional[str] = Field(None, max_length=100)


class SampleProductResponse(CamelModel):
    id: int
    campaign_id: int
    partner_id: int
    product_name: str
    quantity: int
    status: str
    tracking_number: Optional[str] = None
    requested_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None


class ShippingRecordCreate(CamelModel):
    """One shipment; the partner id always comes from the session"""
    campaign_id: int
    shipping_date: datetime
    tracking_number: str = Field(..., min_length=1, max_length=100)
    product_name: str = Field(..., min_length=1, max_length=200)
    recipient_info: Optional[Dict[str, Any]] = None
    memo: Optional[str] = None
    status: ShippingStatus = ShippingStatus.SHIPPED

    @validator('shipping_date')
    def normalize_shipping_date(cls, v):
        return to_naive_utc(v)


class BulkShippingCreate(CamelModel):
    records: List[ShippingRecordCreate] = Field(..., min_length=1)


class ShippingRecordResponse(CamelModel):
    id: int
    campaign_id: int
    partner_id: int
    shipping_date: datetime
    tracking_number: str
    product_name: str
    recipient_info: Optional[Dict[str, Any]] = None
    memo: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
