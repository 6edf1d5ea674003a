"""
Partner administration, earnings and delivery categories
"""

import logging
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models.user import User, UserRole
from app.models.payment import PartnerEarning, EarningStatus
from app.models.partner import PartnerCategory
from app.schemas.user import SessionUser
from app.schemas.partner import PartnerCategoryCreate
from app.utils.exceptions import NotFound

logger = logging.getLogger(__name__)


class PartnerService:
    """Service for partner accounts and their bookkeeping"""

    @staticmethod
    def list_partners(db: Session) -> List[User]:
        return db.query(User).filter(
            User.role == UserRole.PARTNER
        ).order_by(User.created_at.desc(), User.id.desc()).all()

    @staticmethod
    def update_partner_status(db: Session, partner_id: int, is_active: bool) -> User:
        partner = db.query(User).filter(
            User.id == partner_id,
            User.role == UserRole.PARTNER
        ).first()
        if not partner:
            raise NotFound("Partner not found")

        partner.is_active = is_active
        db.commit()
        db.refresh(partner)

        logger.info(f"Partner {partner.id} {'activated' if is_active else 'deactivated'}")
        return partner

    @staticmethod
    def record_earning(
        db: Session,
        partner_id: int,
        campaign_id: int,
        amount: Decimal,
        status: EarningStatus = EarningStatus.PENDING
    ) -> PartnerEarning:
        earning = PartnerEarning(
            partner_id=partner_id,
            campaign_id=campaign_id,
            amount=amount,
            status=status.value
        )
        db.add(earning)
        db.commit()
        db.refresh(earning)
        return earning

    @staticmethod
    def list_earnings(db: Session, current_user: SessionUser) -> List[PartnerEarning]:
        query = db.query(PartnerEarning).order_by(PartnerEarning.earned_at.desc(), PartnerEarning.id.desc())
        if current_user.role == UserRole.ADMIN:
            return query.all()
        return query.filter(PartnerEarning.partner_id == current_user.id).all()

    @staticmethod
    def add_category(db: Session, current_user: SessionUser, category_data: PartnerCategoryCreate) -> PartnerCategory:
        category = PartnerCategory(
            partner_id=current_user.id,
            category=category_data.category,
            delivery_capacity=category_data.delivery_capacity
        )
        db.add(category)
        db.commit()
        db.refresh(category)

        logger.info(f"Partner {current_user.id} declared category '{category.category}'")
        return category

    @staticmethod
    def list_categories(
        db: Session,
        current_user: SessionUser,
        partner_id: Optional[int] = None
    ) -> List[PartnerCategory]:
        """Partners always get their own; admins may ask for any partner or all of them"""
        query = db.query(PartnerCategory)
        if current_user.role == UserRole.ADMIN:
            if partner_id is not None:
                query = query.filter(PartnerCategory.partner_id == partner_id)
        else:
            query = query.filter(PartnerCategory.partner_id == current_user.id)
        return query.order_by(PartnerCategory.id).all()
