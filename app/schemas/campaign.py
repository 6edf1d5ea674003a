"""
Campaign and application Pydantic schemas
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Dict, Any
from pydantic import Field, validator

from app.models.campaign import CampaignStatus, ApplicationStatus
from app.schemas.user import CamelModel
from app.utils.dates import to_naive_utc


class CampaignCreate(CamelModel):
    """Campaign creation schema.

    Budgets accept numbers or numeric strings, ``maxPartners`` accepts an int or a
    numeric string and the four dates are ISO strings; all are coerced here.
    """
    advertiser_id: Optional[int] = None  # honoured for admins only
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=100)
    daily_budget: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    total_budget: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    target_filters: Optional[Dict[str, Any]] = None
    recruitment_start_date: datetime
    recruitment_end_date: datetime
    campaign_start_date: datetime
    campaign_end_date: datetime
    status: CampaignStatus = CampaignStatus.DRAFT
    max_partners: int = Field(10, ge=1)
    qr_code_url: Optional[str] = Field(None, max_length=500)
    product_url: Optional[str] = Field(None, max_length=500)

    class Config:
        extra = "forbid"

    @validator('recruitment_start_date', 'recruitment_end_date', 'campaign_start_date', 'campaign_end_date')
    def normalize_dates(cls, v):
        return to_naive_utc(v)

    @validator('recruitment_end_date')
    def recruitment_window_ordered(cls, v, values):
        start = values.get('recruitment_start_date')
        if start and v < start:
            raise ValueError('recruitmentEndDate must not be before recruitmentStartDate')
        return v

    @validator('campaign_end_date')
    def campaign_window_ordered(cls, v, values):
        start = values.get('campaign_start_date')
        if start and v < start:
            raise ValueError('campaignEndDate must not be before campaignStartDate')
        return v


class CampaignUpdate(CamelModel):
    """Partial campaign update; unknown fields are rejected"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    daily_budget: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    total_budget: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    target_filters: Optional[Dict[str, Any]] = None
    recruitment_start_date: Optional[datetime] = None
    recruitment_end_date: Optional[datetime] = None
    campaign_start_date: Optional[datetime] = None
    campaign_end_date: Optional[datetime] = None
    status: Optional[CampaignStatus] = None
    max_partners: Optional[int] = Field(None, ge=1)
    qr_code_url: Optional[str] = Field(None, max_length=500)
    product_url: Optional[str] = Field(None, max_length=500)

    class Config:
        extra = "forbid"

    @validator(
        'title', 'category', 'daily_budget', 'total_budget', 'recruitment_start_date',
        'recruitment_end_date', 'campaign_start_date', 'campaign_end_date', 'status', 'max_partners',
        pre=True
    )
    def not_null(cls, v):
        if v is None:
            raise ValueError('may be omitted but not null')
        return v

    @validator('recruitment_start_date', 'recruitment_end_date', 'campaign_start_date', 'campaign_end_date')
    def normalize_dates(cls, v):
        return to_naive_utc(v)


class CampaignResponse(CamelModel):
    id: int
    advertiser_id: int
    title: str
    description: Optional[str] = None
    category: str
    daily_budget: Decimal
    total_budget: Decimal
    target_filters: Optional[Dict[str, Any]] = None
    recruitment_start_date: datetime
    recruitment_end_date: datetime
    campaign_start_date: datetime
    campaign_end_date: datetime
    status: str
    max_partners: int
    selected_partners: int
    qr_code_url: Optional[str] = None
    product_url: Optional[str] = None
    created_at: Optional[datetime] = None


class ApplicationCreate(CamelModel):
    application_message: Optional[str] = Field(None, max_length=2000)


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus

    @validator('status')
    def must_be_a_decision(cls, v):
        if v == ApplicationStatus.PENDING:
            raise ValueError('status must be approved or rejected')
        return v


class ApplicationResponse(CamelModel):
    id: int
    campaign_id: int
    partner_id: int
    status: str
    application_message: Optional[str] = None
    applied_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[int] = None
