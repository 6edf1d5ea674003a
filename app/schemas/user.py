"""
User-related Pydantic schemas
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, EmailStr, Field, validator
from pydantic.alias_generators import to_camel

from app.models.user import UserRole


class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire and accepting snake_case too"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class UserCreate(CamelModel):
    """Signup schema"""
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    role: UserRole
    company_name: Optional[str] = Field(None, max_length=200)
    contact_person: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=30)
    bio: Optional[str] = Field(None, max_length=2000)
    profile_image: Optional[str] = Field(None, max_length=500)
    website: Optional[str] = Field(None, max_length=500)
    social_links: Optional[Dict[str, Any]] = None
    specialties: Optional[List[str]] = None
    follower_count: int = Field(0, ge=0)
    engagement_rate: Optional[Decimal] = Field(None, ge=0, le=100)

    @validator('email')
    def normalize_email(cls, v):
        return v.lower()


class UserLogin(BaseModel):
    """User login schema; fields are checked in the route so a missing one is a 400"""
    email: Optional[str] = None
    password: Optional[str] = None


class SessionUser(CamelModel):
    """Authenticated identity passed explicitly to services"""
    id: int
    email: str
    role: UserRole
    company_name: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class UserResponse(CamelModel):
    """Full user profile response (no password hash)"""
    id: int
    email: str
    role: UserRole
    company_name: Optional[str] = None
    contact_person: Optional[str] = None
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    website: Optional[str] = None
    social_links: Optional[Dict[str, Any]] = None
    specialties: Optional[List[str]] = None
    follower_count: Optional[int] = 0
    engagement_rate: Optional[Decimal] = None
    is_active: bool
    is_verified: bool
    created_at: Optional[datetime] = None


class AuthResponse(CamelModel):
    """Login response"""
    user: SessionUser
    access_token: str
    token_type: str = "bearer"


class SignupResponse(AuthResponse):
    """Signup response"""
    success: bool = True
    message: str


class MeResponse(CamelModel):
    user: SessionUser


class PartnerStatusUpdate(CamelModel):
    """Admin toggle for a partner account"""
    is_active: bool
