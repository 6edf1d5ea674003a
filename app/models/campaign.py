"""
Campaign and campaign application models
"""

from enum import Enum
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, Numeric, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database import Base


class CampaignStatus(str, Enum):
    """Campaign status enumeration"""
    DRAFT = "draft"
    RECRUITING = "recruiting"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ApplicationStatus(str, Enum):
    """Partner application status"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Campaign(Base):
    """Advertiser campaign model"""
    __tablename__ = "campaigns"

    id = Column(Integer, primary_key=True, index=True)
    advertiser_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=False)

    # Budget
    daily_budget = Column(Numeric(12, 2), nullable=False)
    total_budget = Column(Numeric(12, 2), nullable=False)
    target_filters = Column(JSON, nullable=True)  # ages, regions, interests

    # Recruitment and execution windows
    recruitment_start_date = Column(DateTime, nullable=False)
    recruitment_end_date = Column(DateTime, nullable=False)
    campaign_start_date = Column(DateTime, nullable=False)
    campaign_end_date = Column(DateTime, nullable=False)

    status = Column(String(20), nullable=False, default=CampaignStatus.DRAFT.value, index=True)

    # selected_partners is expected to stay <= max_partners; nothing enforces it
    max_partners = Column(Integer, nullable=False, default=10)
    selected_partners = Column(Integer, nullable=False, default=0)

    qr_code_url = Column(String(500), nullable=True)
    product_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # Relationships
    advertiser = relationship("User", back_populates="campaigns")
    applications = relationship("CampaignApplication", back_populates="campaign", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Campaign(id={self.id}, title='{self.title}', status='{self.status}')>"


class CampaignApplication(Base):
    """Partner application to a campaign"""
    __tablename__ = "campaign_applications"

    id = Column(Integer, primary_key=True, index=True)
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    partner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=ApplicationStatus.PENDING.value)
    application_message = Column(Text, nullable=True)
    applied_at = Column(DateTime, server_default=func.now(), nullable=False)
    reviewed_at = Column(DateTime, nullable=True)
    reviewed_by = Column(Integer, ForeignKey("users.id"), nullable=True)

    campaign = relationship("Campaign", back_populates="applications")
    partner = relationship("User", back_populates="applications", foreign_keys=[partner_id])

    def __repr__(self):
        return f"<CampaignApplication(id={self.id}, campaign_id={self.campaign_id}, status='{self.status}')>"
