"""
Performance metric routes
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from app.schemas.user import SessionUser
from app.schemas.analytics import PerformanceMetricResponse
from app.services.performance_service import PerformanceService
from app.utils.security import require_authenticated

router = APIRouter()


@router.get("", response_model=List[PerformanceMetricResponse])
async def list_performance_metrics(
    campaign_id: Optional[str] = Query(None, alias="campaignId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    current_user: SessionUser = Depends(require_authenticated),
    db: Session = Depends(get_db)
):
    return PerformanceService.list_for_user(db, current_user, campaign_id, start_date, end_date)
