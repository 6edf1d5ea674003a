"""
Pydantic schemas for request/response validation
"""

from .user import (
    CamelModel, UserCreate, UserLogin, SessionUser, UserResponse,
    AuthResponse, SignupResponse, MeResponse, PartnerStatusUpdate
)
from .campaign import (
    CampaignCreate, CampaignUpdate, CampaignResponse,
    ApplicationCreate, ApplicationStatusUpdate, ApplicationResponse
)
from .fulfillment import (
    SampleProductCreate, SampleStatusUpdate, SampleProductResponse,
    ShippingRecordCreate, BulkShippingCreate, ShippingRecordResponse
)
from .analytics import AdminStats, PerformanceMetricResponse
from .payment import (
    PaymentCreate, PaymentIntentCreate, PaymentProcess, PaymentIntentResponse,
    PaymentProcessResponse, PaymentResponse, PartnerEarningResponse
)
from .partner import PartnerCategoryCreate, PartnerCategoryResponse

__all__ = [
    # User schemas
    "CamelModel", "UserCreate", "UserLogin", "SessionUser", "UserResponse",
    "AuthResponse", "SignupResponse", "MeResponse", "PartnerStatusUpdate",

    # Campaign schemas
    "CampaignCreate", "CampaignUpdate", "CampaignResponse",
    "ApplicationCreate", "ApplicationStatusUpdate", "ApplicationResponse",

    # Fulfillment schemas
    "SampleProductCreate", "SampleStatusUpdate", "SampleProductResponse",
    "ShippingRecordCreate", "BulkShippingCreate", "ShippingRecordResponse",

    # Analytics schemas
    "AdminStats", "PerformanceMetricResponse",

    # Payment schemas
    "PaymentCreate", "PaymentIntentCreate", "PaymentProcess", "PaymentIntentResponse",
    "PaymentProcessResponse", "PaymentResponse", "PartnerEarningResponse",

    # Partner schemas
    "PartnerCategoryCreate", "PartnerCategoryResponse"
]
