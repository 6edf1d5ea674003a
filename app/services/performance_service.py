"""
Performance metric queries for campaign dashboards
"""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models.performance import PerformanceMetric
from app.schemas.user import SessionUser
from app.services.campaign_service import CampaignService
from app.utils.dates import parse_date_range
from app.utils.exceptions import ValidationFailed

logger = logging.getLogger(__name__)


class PerformanceService:
    """Read access to externally imported performance metrics"""

    @staticmethod
    def record_metric(db: Session, **fields) -> PerformanceMetric:
        """Store one metric row, as the analytics import does"""
        metric = PerformanceMetric(**fields)
        db.add(metric)
        db.commit()
        db.refresh(metric)
        return metric

    @staticmethod
    def get_metrics(db: Session, campaign_id: int, partner_id: Optional[int] = None) -> List[PerformanceMetric]:
        query = db.query(PerformanceMetric).filter(PerformanceMetric.campaign_id == campaign_id)
        if partner_id:
            query = query.filter(PerformanceMetric.partner_id == partner_id)
        return query.order_by(PerformanceMetric.date.desc(), PerformanceMetric.id.desc()).all()

    @staticmethod
    def get_metrics_by_date_range(
        db: Session,
        start: datetime,
        end: datetime,
        campaign_id: Optional[int] = None
    ) -> List[PerformanceMetric]:
        query = db.query(PerformanceMetric).filter(
            PerformanceMetric.date >= start,
            PerformanceMetric.date <= end
        )
        if campaign_id:
            query = query.filter(PerformanceMetric.campaign_id == campaign_id)
        return query.order_by(PerformanceMetric.date.desc(), PerformanceMetric.id.desc()).all()

    @staticmethod
    def list_for_user(
        db: Session,
        current_user: SessionUser,
        campaign_id: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> List[PerformanceMetric]:
        """Resolve which metrics to show, in this order:

        1. both dates given: metrics in the range, optionally for one campaign
        2. a campaign id given: that campaign's metrics
        3. otherwise: the caller's most recent campaign as advertiser, or nothing
        """
        parsed_campaign_id = None
        if campaign_id:
            try:
                parsed_campaign_id = int(campaign_id)
            except ValueError:
                raise ValidationFailed(f"Invalid campaignId: {campaign_id!r}")

        if start_date and end_date:
            start, end = parse_date_range(start_date, end_date)
            return PerformanceService.get_metrics_by_date_range(db, start, end, parsed_campaign_id)

        if parsed_campaign_id is not None:
            return PerformanceService.get_metrics(db, parsed_campaign_id)

        campaigns = CampaignService.get_campaigns_by_advertiser(db, current_user.id)
        if not campaigns:
            return []
        return PerformanceService.get_metrics(db, campaigns[0].id)
