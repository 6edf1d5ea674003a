"""
Service layer for AllReview backend
"""

from .auth_service import AuthService
from .session_service import SessionStore
from .campaign_service import CampaignService, ApplicationService
from .sample_service import SampleService
from .shipping_service import ShippingService
from .performance_service import PerformanceService
from .analytics_service import AnalyticsService
from .payment_service import PaymentService, StripeGateway
from .partner_service import PartnerService

__all__ = [
    "AuthService",
    "SessionStore",
    "CampaignService",
    "ApplicationService",
    "SampleService",
    "ShippingService",
    "PerformanceService",
    "AnalyticsService",
    "PaymentService",
    "StripeGateway",
    "PartnerService"
]
