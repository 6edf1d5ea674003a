"""
Admin dashboard statistics
"""

import logging
from datetime import datetime
from typing import Dict, Any, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from app.models.user import User, UserRole
from app.models.campaign import Campaign
from app.models.fulfillment import ShippingRecord, ShippingStatus
from app.models.performance import PerformanceMetric
from app.utils.dates import month_bounds
from app.utils.exceptions import AggregationFailed

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Aggregates recomputed from the raw rows on every call"""

    @staticmethod
    def format_success_rate(delivered: int, total: int) -> str:
        """Percentage with one decimal, or the literal "0" when nothing shipped"""
        if total <= 0:
            return "0"
        return f"{delivered / total * 100:.1f}"

    @staticmethod
    def get_admin_stats(db: Session, today: Optional[datetime] = None) -> Dict[str, Any]:
        """Platform-wide totals for the admin dashboard.

        totalCampaigns counts every campaign regardless of status or owner.
        monthlyRevenue covers metrics dated on any day of the current month, taken
        in UTC like every stored timestamp.
        """
        today = today or datetime.utcnow()
        month_start, next_month_start = month_bounds(today)

        try:
            total_campaigns = db.query(func.count(Campaign.id)).scalar() or 0

            active_partners = db.query(func.count(User.id)).filter(
                User.role == UserRole.PARTNER,
                User.is_active.is_(True)
            ).scalar() or 0

            monthly_revenue = db.query(func.sum(PerformanceMetric.revenue)).filter(
                PerformanceMetric.date >= month_start,
                PerformanceMetric.date < next_month_start
            ).scalar()

            total_shipped = db.query(func.count(ShippingRecord.id)).scalar() or 0
            delivered = db.query(func.count(ShippingRecord.id)).filter(
                ShippingRecord.status == ShippingStatus.DELIVERED.value
            ).scalar() or 0
        except SQLAlchemyError as e:
            logger.error(f"Admin stats aggregation failed: {e}")
            raise AggregationFailed()

        return {
            "total_campaigns": total_campaigns,
            "active_partners": active_partners,
            "monthly_revenue": str(monthly_revenue) if monthly_revenue is not None else "0",
            "success_rate": AnalyticsService.format_success_rate(delivered, total_shipped)
        }
