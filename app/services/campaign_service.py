"""
Campaign management: campaigns and partner applications
"""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.models.user import UserRole
from app.models.campaign import Campaign, CampaignApplication, CampaignStatus, ApplicationStatus
from app.models.fulfillment import SampleProduct, ShippingRecord
from app.models.payment import Payment, PartnerEarning
from app.models.performance import PerformanceMetric
from app.schemas.user import SessionUser
from app.schemas.campaign import CampaignCreate, CampaignUpdate, ApplicationCreate
from app.utils.exceptions import NotFound, Forbidden, ValidationFailed

logger = logging.getLogger(__name__)


class CampaignService:
    """Service for managing advertiser campaigns"""

    @staticmethod
    def create_campaign(db: Session, current_user: SessionUser, campaign_data: CampaignCreate) -> Campaign:
        """Create a campaign; advertisers always own what they create, admins may pick the owner"""
        fields = campaign_data.dict(exclude={"advertiser_id"})
        if current_user.is_admin:
            advertiser_id = campaign_data.advertiser_id or current_user.id
        else:
            advertiser_id = current_user.id

        campaign = Campaign(advertiser_id=advertiser_id, **fields)
        campaign.status = campaign_data.status.value

        db.add(campaign)
        db.commit()
        db.refresh(campaign)

        logger.info(f"Campaign {campaign.id} '{campaign.title}' created by user {current_user.id}")
        return campaign

    @staticmethod
    def get_campaign(db: Session, campaign_id: int) -> Campaign:
        campaign = db.query(Campaign).filter(Campaign.id == campaign_id).first()
        if not campaign:
            raise NotFound("Campaign not found")
        return campaign

    @staticmethod
    def get_campaigns_by_advertiser(db: Session, advertiser_id: int) -> List[Campaign]:
        return db.query(Campaign).filter(
            Campaign.advertiser_id == advertiser_id
        ).order_by(Campaign.created_at.desc(), Campaign.id.desc()).all()

    @staticmethod
    def get_recruiting_campaigns(db: Session, now: Optional[datetime] = None) -> List[Campaign]:
        """Campaigns currently open for partner applications"""
        now = now or datetime.utcnow()
        return db.query(Campaign).filter(
            Campaign.status == CampaignStatus.RECRUITING.value,
            Campaign.recruitment_start_date <= now,
            Campaign.recruitment_end_date >= now
        ).order_by(Campaign.created_at.desc(), Campaign.id.desc()).all()

    @staticmethod
    def list_for_user(db: Session, current_user: SessionUser) -> List[Campaign]:
        """Campaigns visible to the caller's role"""
        if current_user.role == UserRole.ADMIN:
            return db.query(Campaign).order_by(Campaign.created_at.desc(), Campaign.id.desc()).all()
        elif current_user.role == UserRole.ADVERTISER:
            return CampaignService.get_campaigns_by_advertiser(db, current_user.id)
        elif current_user.role == UserRole.PARTNER:
            return CampaignService.get_recruiting_campaigns(db)
        raise Forbidden()

    @staticmethod
    def ensure_manageable(campaign: Campaign, current_user: SessionUser) -> None:
        """Advertisers may only manage their own campaigns"""
        if current_user.role == UserRole.ADVERTISER and campaign.advertiser_id != current_user.id:
            logger.warning(f"User {current_user.id} tried to manage campaign {campaign.id} of another advertiser")
            raise Forbidden("You can only manage your own campaigns")

    @staticmethod
    def update_campaign(
        db: Session,
        current_user: SessionUser,
        campaign_id: int,
        update_data: CampaignUpdate
    ) -> Campaign:
        """Apply a partial update"""
        campaign = CampaignService.get_campaign(db, campaign_id)
        CampaignService.ensure_manageable(campaign, current_user)

        changes = update_data.dict(exclude_unset=True)
        for window in ("recruitment", "campaign"):
            start = changes.get(f"{window}_start_date", getattr(campaign, f"{window}_start_date"))
            end = changes.get(f"{window}_end_date", getattr(campaign, f"{window}_end_date"))
            if end < start:
                raise ValidationFailed(f"{window}EndDate must not be before {window}StartDate")

        for field, value in changes.items():
            if field == "status":
                value = CampaignStatus(value).value
            setattr(campaign, field, value)

        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to update campaign {campaign.id}: {e}")
            raise
        db.refresh(campaign)

        logger.info(f"Campaign {campaign.id} updated by user {current_user.id}")
        return campaign

    @staticmethod
    def delete_campaign(db: Session, current_user: SessionUser, campaign_id: int) -> None:
        """Delete a campaign and its applications.

        Campaigns that other records already point at are kept; cancel those instead.
        """
        campaign = CampaignService.get_campaign(db, campaign_id)

        for model in (SampleProduct, ShippingRecord, PerformanceMetric, Payment, PartnerEarning):
            if db.query(model.id).filter(model.campaign_id == campaign_id).first():
                raise ValidationFailed(
                    f"Campaign has {model.__tablename__.replace('_', ' ')} and cannot be deleted"
                )

        db.delete(campaign)
        db.commit()

        logger.info(f"Campaign {campaign_id} deleted by user {current_user.id}")

    @staticmethod
    def set_status(campaign: Campaign, new_status: CampaignStatus) -> Campaign:
        """Change status without committing; caller owns the transaction"""
        logger.info(f"Campaign {campaign.id} status {campaign.status} -> {new_status.value}")
        campaign.status = new_status.value
        return campaign


class ApplicationService:
    """Partner applications to campaigns"""

    @staticmethod
    def apply(
        db: Session,
        current_user: SessionUser,
        campaign_id: int,
        application_data: ApplicationCreate
    ) -> CampaignApplication:
        CampaignService.get_campaign(db, campaign_id)

        application = CampaignApplication(
            campaign_id=campaign_id,
            partner_id=current_user.id,
            application_message=application_data.application_message,
            status=ApplicationStatus.PENDING.value
        )
        db.add(application)
        db.commit()
        db.refresh(application)

        logger.info(f"Partner {current_user.id} applied to campaign {campaign_id}")
        return application

    @staticmethod
    def list_for_campaign(db: Session, current_user: SessionUser, campaign_id: int) -> List[CampaignApplication]:
        campaign = CampaignService.get_campaign(db, campaign_id)
        CampaignService.ensure_manageable(campaign, current_user)
        return db.query(CampaignApplication).filter(
            CampaignApplication.campaign_id == campaign_id
        ).order_by(CampaignApplication.applied_at.desc(), CampaignApplication.id.desc()).all()

    @staticmethod
    def list_for_partner(db: Session, partner_id: int) -> List[CampaignApplication]:
        return db.query(CampaignApplication).filter(
            CampaignApplication.partner_id == partner_id
        ).order_by(CampaignApplication.applied_at.desc(), CampaignApplication.id.desc()).all()

    @staticmethod
    def review(
        db: Session,
        current_user: SessionUser,
        application_id: int,
        new_status: ApplicationStatus
    ) -> CampaignApplication:
        """Record the reviewer's decision"""
        application = db.query(CampaignApplication).filter(CampaignApplication.id == application_id).first()
        if not application:
            raise NotFound("Application not found")
        CampaignService.ensure_manageable(application.campaign, current_user)

        application.status = new_status.value
        application.reviewed_by = current_user.id
        application.reviewed_at = datetime.utcnow()

        db.commit()
        db.refresh(application)

        logger.info(f"Application {application.id} {new_status.value} by user {current_user.id}")
        return application
