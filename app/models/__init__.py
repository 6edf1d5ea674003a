"""
Database models for AllReview
"""

from .user import User, UserRole
from .campaign import Campaign, CampaignApplication, CampaignStatus, ApplicationStatus
from .fulfillment import SampleProduct, ShippingRecord, SampleStatus, ShippingStatus
from .performance import PerformanceMetric
from .partner import PartnerCategory
from .payment import Payment, PartnerEarning, PaymentStatus, EarningStatus

__all__ = [
    "User",
    "UserRole",
    "Campaign",
    "CampaignApplication",
    "CampaignStatus",
    "ApplicationStatus",
    "SampleProduct",
    "ShippingRecord",
    "SampleStatus",
    "ShippingStatus",
    "PerformanceMetric",
    "PartnerCategory",
    "Payment",
    "PartnerEarning",
    "PaymentStatus",
    "EarningStatus"
]
