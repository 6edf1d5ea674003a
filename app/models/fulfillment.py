"""
Sample product and shipping record models
"""

from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, ForeignKey
from sqlalchemy.sql import func
import enum

from database import Base


class SampleStatus(str, enum.Enum):
    """Sample product status enumeration"""
    PENDING = "pending"
    APPROVED = "approved"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


class ShippingStatus(str, enum.Enum):
    """Shipping record status enumeration"""
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    FAILED = "failed"


class SampleProduct(Base):
    """Sample product requested by a partner for review"""
    __tablename__ = "sample_products"

    id = Column(Integer, primary_key=True, index=True)
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    partner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    product_name = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default=SampleStatus.PENDING.value)
    tracking_number = Column(String(100), nullable=True)

    # Transition timestamps
    requested_at = Column(DateTime, server_default=func.now(), nullable=False)
    approved_at = Column(DateTime, nullable=True)
    shipped_at = Column(DateTime, nullable=True)
    delivered_at = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<SampleProduct(id={self.id}, product='{self.product_name}', status='{self.status}')>"


class ShippingRecord(Base):
    """Shipment registered by a partner"""
    __tablename__ = "shipping_records"

    id = Column(Integer, primary_key=True, index=True)
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    partner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    shipping_date = Column(DateTime, nullable=False, index=True)
    tracking_number = Column(String(100), nullable=False)
    product_name = Column(String(200), nullable=False)
    recipient_info = Column(JSON, nullable=True)  # name, address, phone
    memo = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=ShippingStatus.SHIPPED.value, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<ShippingRecord(id={self.id}, tracking='{self.tracking_number}', status='{self.status}')>"
