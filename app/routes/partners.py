"""
Partner administration, earnings and category routes
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_db
from app.models.user import UserRole
from app.schemas.user import SessionUser, UserResponse, PartnerStatusUpdate
from app.schemas.payment import PartnerEarningResponse
from app.schemas.partner import PartnerCategoryCreate, PartnerCategoryResponse
from app.services.partner_service import PartnerService
from app.utils.security import require_admin, require_partner, require_role

router = APIRouter()
earnings_router = APIRouter()

require_partner_or_admin = require_role(UserRole.PARTNER, UserRole.ADMIN)


@router.get("", response_model=List[UserResponse])
async def list_partners(
    current_user: SessionUser = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return PartnerService.list_partners(db)


@router.post("/categories", response_model=PartnerCategoryResponse, status_code=status.HTTP_201_CREATED)
async def add_partner_category(
    category_data: PartnerCategoryCreate,
    current_user: SessionUser = Depends(require_partner),
    db: Session = Depends(get_db)
):
    return PartnerService.add_category(db, current_user, category_data)


@router.get("/categories", response_model=List[PartnerCategoryResponse])
async def list_partner_categories(
    partner_id: Optional[int] = Query(None, alias="partnerId"),
    current_user: SessionUser = Depends(require_partner_or_admin),
    db: Session = Depends(get_db)
):
    return PartnerService.list_categories(db, current_user, partner_id)


@router.put("/{partner_id}/status", response_model=UserResponse)
async def update_partner_status(
    partner_id: int,
    update: PartnerStatusUpdate,
    current_user: SessionUser = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Activate or deactivate a partner account"""
    return PartnerService.update_partner_status(db, partner_id, update.is_active)


@earnings_router.get("", response_model=List[PartnerEarningResponse])
async def list_partner_earnings(
    current_user: SessionUser = Depends(require_partner_or_admin),
    db: Session = Depends(get_db)
):
    return PartnerService.list_earnings(db, current_user)
