"""
Sample product requests and their approval/shipping workflow
"""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models.user import UserRole
from app.models.fulfillment import SampleProduct, SampleStatus
from app.schemas.user import SessionUser
from app.schemas.fulfillment import SampleProductCreate
from app.services.campaign_service import CampaignService
from app.utils.exceptions import NotFound

logger = logging.getLogger(__name__)

# Timestamp column stamped when a sample enters each status
STATUS_TIMESTAMPS = {
    SampleStatus.APPROVED: "approved_at",
    SampleStatus.SHIPPED: "shipped_at",
    SampleStatus.DELIVERED: "delivered_at",
}


class SampleService:
    """Service for sample product requests"""

    @staticmethod
    def request_sample(db: Session, current_user: SessionUser, sample_data: SampleProductCreate) -> SampleProduct:
        CampaignService.get_campaign(db, sample_data.campaign_id)

        sample = SampleProduct(
            campaign_id=sample_data.campaign_id,
            partner_id=current_user.id,
            product_name=sample_data.product_name,
            quantity=sample_data.quantity,
            status=SampleStatus.PENDING.value
        )
        db.add(sample)
        db.commit()
        db.refresh(sample)

        logger.info(f"Partner {current_user.id} requested sample {sample.id} for campaign {sample.campaign_id}")
        return sample

    @staticmethod
    def get_samples_by_partner(db: Session, partner_id: int) -> List[SampleProduct]:
        return db.query(SampleProduct).filter(
            SampleProduct.partner_id == partner_id
        ).order_by(SampleProduct.requested_at.desc(), SampleProduct.id.desc()).all()

    @staticmethod
    def get_samples_by_campaign(db: Session, campaign_id: int) -> List[SampleProduct]:
        return db.query(SampleProduct).filter(
            SampleProduct.campaign_id == campaign_id
        ).order_by(SampleProduct.requested_at.desc(), SampleProduct.id.desc()).all()

    @staticmethod
    def list_for_user(db: Session, current_user: SessionUser, campaign_id: Optional[int] = None) -> List[SampleProduct]:
        """Partners see their own requests, admins all or one campaign's, advertisers nothing"""
        if current_user.role == UserRole.PARTNER:
            return SampleService.get_samples_by_partner(db, current_user.id)
        elif current_user.role == UserRole.ADMIN:
            if campaign_id is not None:
                return SampleService.get_samples_by_campaign(db, campaign_id)
            return db.query(SampleProduct).order_by(
                SampleProduct.requested_at.desc(), SampleProduct.id.desc()
            ).all()
        return []

    @staticmethod
    def update_status(
        db: Session,
        sample_id: int,
        new_status: SampleStatus,
        tracking_number: Optional[str] = None
    ) -> SampleProduct:
        sample = db.query(SampleProduct).filter(SampleProduct.id == sample_id).first()
        if not sample:
            raise NotFound("Sample product not found")

        sample.status = new_status.value
        timestamp_field = STATUS_TIMESTAMPS.get(new_status)
        if timestamp_field:
            setattr(sample, timestamp_field, datetime.utcnow())
        if tracking_number:
            sample.tracking_number = tracking_number

        db.commit()
        db.refresh(sample)

        logger.info(f"Sample {sample.id} moved to {new_status.value}")
        return sample
