"""
Admin dashboard routes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from app.schemas.user import SessionUser
from app.schemas.analytics import AdminStats
from app.services.analytics_service import AnalyticsService
from app.utils.security import require_admin

router = APIRouter()


@router.get("/stats", response_model=AdminStats)
async def get_admin_stats(
    current_user: SessionUser = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Platform totals recomputed on every call"""
    return AnalyticsService.get_admin_stats(db)
