"""
User model and related functionality
"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, Enum, Text, JSON, Numeric
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum

from database import Base


class UserRole(str, enum.Enum):
    """User role enumeration - fixed at signup"""
    ADMIN = "admin"              # Platform operators
    ADVERTISER = "advertiser"    # Creates and funds campaigns
    PARTNER = "partner"          # Content creators applying to campaigns


class User(Base):
    """User model"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(UserRole), nullable=False, index=True)

    # Profile information
    company_name = Column(String(200), nullable=True)
    contact_person = Column(String(100), nullable=True)
    phone_number = Column(String(30), nullable=True)
    bio = Column(Text, nullable=True)
    profile_image = Column(String(500), nullable=True)
    website = Column(String(500), nullable=True)
    social_links = Column(JSON, nullable=True)  # Instagram, YouTube, blog URLs
    specialties = Column(JSON, nullable=True)   # Areas of expertise
    follower_count = Column(Integer, nullable=False, default=0)
    engagement_rate = Column(Numeric(5, 2), nullable=True)

    # Status
    is_active = Column(Boolean, nullable=False, default=True)
    is_verified = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    campaigns = relationship("Campaign", back_populates="advertiser")
    applications = relationship(
        "CampaignApplication",
        back_populates="partner",
        foreign_keys="CampaignApplication.partner_id"
    )
    partner_categories = relationship("PartnerCategory", back_populates="partner", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"

