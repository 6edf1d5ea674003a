"""
Shipping record routes
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_db
from app.schemas.user import SessionUser
from app.schemas.fulfillment import ShippingRecordCreate, BulkShippingCreate, ShippingRecordResponse
from app.services.shipping_service import ShippingService
from app.utils.security import require_authenticated, require_partner

router = APIRouter()


@router.post("", response_model=ShippingRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_shipping_record(
    record_data: ShippingRecordCreate,
    current_user: SessionUser = Depends(require_partner),
    db: Session = Depends(get_db)
):
    return ShippingService.create_record(db, current_user, record_data)


@router.post("/bulk", response_model=List[ShippingRecordResponse], status_code=status.HTTP_201_CREATED)
async def create_shipping_records_bulk(
    bulk_data: BulkShippingCreate,
    current_user: SessionUser = Depends(require_partner),
    db: Session = Depends(get_db)
):
    """Register a batch of shipments; the batch is stored whole or not at all"""
    return ShippingService.create_bulk_records(db, current_user, bulk_data.records)


@router.get("", response_model=List[ShippingRecordResponse])
async def list_shipping_records(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    current_user: SessionUser = Depends(require_authenticated),
    db: Session = Depends(get_db)
):
    return ShippingService.list_for_user(db, current_user, start_date, end_date)
