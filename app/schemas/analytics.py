"""
Analytics and dashboard schemas
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.schemas.user import CamelModel


class AdminStats(CamelModel):
    """Admin dashboard figures; revenue and rate are preformatted strings"""
    total_campaigns: int
    active_partners: int
    monthly_revenue: str
    success_rate: str


class PerformanceMetricResponse(CamelModel):
    id: int
    campaign_id: int
    partner_id: Optional[int] = None
    date: datetime
    qr_scans: int
    conversions: int
    revenue: Decimal
    delivery_rate: Decimal
    created_at: Optional[datetime] = None
