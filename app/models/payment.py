"""
Payment and partner earning models
"""

from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey
from sqlalchemy.sql import func
import enum

from database import Base


class PaymentStatus(str, enum.Enum):
    """Payment status enumeration"""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class EarningStatus(str, enum.Enum):
    """Partner earning status enumeration"""
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class Payment(Base):
    """Campaign payment made by an advertiser"""
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    advertiser_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), nullable=False, default=PaymentStatus.PENDING.value)
    payment_method = Column(String(50), nullable=False)  # card, bank_transfer, stripe
    transaction_id = Column(String(100), nullable=True)  # Gateway reference
    processed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Payment(id={self.id}, campaign_id={self.campaign_id}, amount={self.amount}, status='{self.status}')>"


class PartnerEarning(Base):
    """Earning owed to a partner for a campaign"""
    __tablename__ = "partner_earnings"

    id = Column(Integer, primary_key=True, index=True)
    partner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default=EarningStatus.PENDING.value)
    earned_at = Column(DateTime, server_default=func.now(), nullable=False)
    paid_at = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<PartnerEarning(id={self.id}, partner_id={self.partner_id}, amount={self.amount})>"
