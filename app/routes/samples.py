"""
Sample product routes
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_db
from app.schemas.user import SessionUser
from app.schemas.fulfillment import SampleProductCreate, SampleStatusUpdate, SampleProductResponse
from app.services.sample_service import SampleService
from app.utils.security import require_authenticated, require_partner, require_admin

router = APIRouter()


@router.post("", response_model=SampleProductResponse, status_code=status.HTTP_201_CREATED)
async def request_sample(
    sample_data: SampleProductCreate,
    current_user: SessionUser = Depends(require_partner),
    db: Session = Depends(get_db)
):
    return SampleService.request_sample(db, current_user, sample_data)


@router.get("", response_model=List[SampleProductResponse])
async def list_samples(
    campaign_id: Optional[int] = Query(None, alias="campaignId"),
    current_user: SessionUser = Depends(require_authenticated),
    db: Session = Depends(get_db)
):
    return SampleService.list_for_user(db, current_user, campaign_id)


@router.put("/{sample_id}/status", response_model=SampleProductResponse)
async def update_sample_status(
    sample_id: int,
    update: SampleStatusUpdate,
    current_user: SessionUser = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return SampleService.update_status(db, sample_id, update.status, update.tracking_number)
