"""
Partner category schemas
"""

from decimal import Decimal
from pydantic import Field

from app.schemas.user import CamelModel


class PartnerCategoryCreate(CamelModel):
    category: str = Field(..., min_length=1, max_length=100)
    delivery_capacity: int = Field(..., ge=1)


class PartnerCategoryResponse(CamelModel):
    id: int
    partner_id: int
    category: str
    delivery_capacity: int
    success_rate: Decimal
    is_active: bool
