"""
Shipping records registered by partners
"""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.models.user import UserRole
from app.models.campaign import Campaign
from app.models.fulfillment import ShippingRecord
from app.schemas.user import SessionUser
from app.schemas.fulfillment import ShippingRecordCreate
from app.services.campaign_service import CampaignService
from app.utils.dates import parse_date_range
from app.utils.exceptions import ValidationFailed

logger = logging.getLogger(__name__)


class ShippingService:
    """Service for shipping records"""

    @staticmethod
    def _build_record(partner_id: int, record_data: ShippingRecordCreate) -> ShippingRecord:
        fields = record_data.dict()
        fields["status"] = record_data.status.value
        return ShippingRecord(partner_id=partner_id, **fields)

    @staticmethod
    def create_record(db: Session, current_user: SessionUser, record_data: ShippingRecordCreate) -> ShippingRecord:
        CampaignService.get_campaign(db, record_data.campaign_id)
        record = ShippingService._build_record(current_user.id, record_data)
        db.add(record)
        db.commit()
        db.refresh(record)

        logger.info(f"Partner {current_user.id} registered shipment {record.tracking_number}")
        return record

    @staticmethod
    def create_bulk_records(
        db: Session,
        current_user: SessionUser,
        records_data: List[ShippingRecordCreate]
    ) -> List[ShippingRecord]:
        """Insert every record or none of them"""
        campaign_ids = {data.campaign_id for data in records_data}
        known = {row.id for row in db.query(Campaign.id).filter(Campaign.id.in_(campaign_ids))}
        missing = sorted(campaign_ids - known)
        if missing:
            raise ValidationFailed(f"Unknown campaignId: {', '.join(str(i) for i in missing)}")

        records = [ShippingService._build_record(current_user.id, data) for data in records_data]
        try:
            db.add_all(records)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Bulk shipping insert of {len(records)} records failed for partner {current_user.id}: {e}")
            raise

        for record in records:
            db.refresh(record)

        logger.info(f"Partner {current_user.id} registered {len(records)} shipments in bulk")
        return records

    @staticmethod
    def get_records_by_partner(db: Session, partner_id: int) -> List[ShippingRecord]:
        return db.query(ShippingRecord).filter(
            ShippingRecord.partner_id == partner_id
        ).order_by(ShippingRecord.created_at.desc(), ShippingRecord.id.desc()).all()

    @staticmethod
    def get_records_by_campaign(db: Session, campaign_id: int) -> List[ShippingRecord]:
        return db.query(ShippingRecord).filter(
            ShippingRecord.campaign_id == campaign_id
        ).order_by(ShippingRecord.created_at.desc(), ShippingRecord.id.desc()).all()

    @staticmethod
    def get_records_by_date_range(db: Session, start: datetime, end: datetime) -> List[ShippingRecord]:
        """Shipments whose shipping date lies in the inclusive range"""
        return db.query(ShippingRecord).filter(
            ShippingRecord.shipping_date >= start,
            ShippingRecord.shipping_date <= end
        ).order_by(ShippingRecord.shipping_date.desc(), ShippingRecord.id.desc()).all()

    @staticmethod
    def list_for_user(
        db: Session,
        current_user: SessionUser,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> List[ShippingRecord]:
        """Partners see their own shipments; others need a date range, otherwise nothing"""
        if current_user.role == UserRole.PARTNER:
            return ShippingService.get_records_by_partner(db, current_user.id)

        if start_date and end_date:
            start, end = parse_date_range(start_date, end_date)
            return ShippingService.get_records_by_date_range(db, start, end)

        return []
