"""
Campaign management routes
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from app.schemas.user import SessionUser
from app.schemas.campaign import (
    CampaignCreate, CampaignUpdate, CampaignResponse, ApplicationCreate, ApplicationResponse
)
from app.services.campaign_service import CampaignService, ApplicationService
from app.utils.security import require_admin, require_authenticated, require_campaign_manager, require_partner

router = APIRouter()


@router.post("", response_model=CampaignResponse, status_code=status.HTTP_201_CREATED)
async def create_campaign(
    campaign_data: CampaignCreate,
    current_user: SessionUser = Depends(require_campaign_manager),
    db: Session = Depends(get_db)
):
    return CampaignService.create_campaign(db, current_user, campaign_data)


@router.get("", response_model=List[CampaignResponse])
async def list_campaigns(
    current_user: SessionUser = Depends(require_authenticated),
    db: Session = Depends(get_db)
):
    """Admins see every campaign, advertisers their own, partners the ones recruiting now"""
    return CampaignService.list_for_user(db, current_user)


@router.get("/{campaign_id}", response_model=CampaignResponse)
async def get_campaign(
    campaign_id: int,
    current_user: SessionUser = Depends(require_authenticated),
    db: Session = Depends(get_db)
):
    return CampaignService.get_campaign(db, campaign_id)


@router.put("/{campaign_id}", response_model=CampaignResponse)
async def update_campaign(
    campaign_id: int,
    update_data: CampaignUpdate,
    current_user: SessionUser = Depends(require_campaign_manager),
    db: Session = Depends(get_db)
):
    return CampaignService.update_campaign(db, current_user, campaign_id, update_data)


@router.delete("/{campaign_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_campaign(
    campaign_id: int,
    current_user: SessionUser = Depends(require_admin),
    db: Session = Depends(get_db)
):
    CampaignService.delete_campaign(db, current_user, campaign_id)


@router.post("/{campaign_id}/apply", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def apply_to_campaign(
    campaign_id: int,
    application_data: ApplicationCreate,
    current_user: SessionUser = Depends(require_partner),
    db: Session = Depends(get_db)
):
    return ApplicationService.apply(db, current_user, campaign_id, application_data)


@router.get("/{campaign_id}/applications", response_model=List[ApplicationResponse])
async def list_campaign_applications(
    campaign_id: int,
    current_user: SessionUser = Depends(require_campaign_manager),
    db: Session = Depends(get_db)
):
    return ApplicationService.list_for_campaign(db, current_user, campaign_id)
