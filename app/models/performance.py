"""
Performance tracking models
"""

from sqlalchemy import Column, Integer, DateTime, Numeric, ForeignKey
from sqlalchemy.sql import func

from database import Base


class PerformanceMetric(Base):
    """Daily analytics row per campaign (and optionally per partner).

    Rows are produced by the external analytics import; the API only reads them.
    """
    __tablename__ = "performance_metrics"

    id = Column(Integer, primary_key=True, index=True)
    campaign_id = Column(Integer, ForeignKey("campaigns.id"), nullable=False, index=True)
    partner_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    date = Column(DateTime, nullable=False, index=True)
    qr_scans = Column(Integer, nullable=False, default=0)
    conversions = Column(Integer, nullable=False, default=0)
    revenue = Column(Numeric(12, 2), nullable=False, default=0)
    delivery_rate = Column(Numeric(5, 2), nullable=False, default=0)  # percentage
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<PerformanceMetric(id={self.id}, campaign_id={self.campaign_id}, date={self.date})>"
