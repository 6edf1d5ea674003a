"""
Campaign application routes
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from app.schemas.user import SessionUser
from app.schemas.campaign import ApplicationResponse, ApplicationStatusUpdate
from app.services.campaign_service import ApplicationService
from app.utils.security import require_campaign_manager, require_partner

router = APIRouter()


@router.get("/mine", response_model=List[ApplicationResponse])
async def list_my_applications(
    current_user: SessionUser = Depends(require_partner),
    db: Session = Depends(get_db)
):
    return ApplicationService.list_for_partner(db, current_user.id)


@router.put("/{application_id}/status", response_model=ApplicationResponse)
async def review_application(
    application_id: int,
    decision: ApplicationStatusUpdate,
    current_user: SessionUser = Depends(require_campaign_manager),
    db: Session = Depends(get_db)
):
    """Approve or reject an application"""
    return ApplicationService.review(db, current_user, application_id, decision.status)
