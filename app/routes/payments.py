"""
Payment routes
"""

from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from database import get_db
from app.schemas.user import SessionUser
from app.schemas.payment import (
    PaymentCreate, PaymentResponse, PaymentIntentCreate, PaymentIntentResponse,
    PaymentProcess, PaymentProcessResponse
)
from app.services.payment_service import PaymentService, StripeGateway, get_payment_gateway
from app.utils.security import require_authenticated, require_advertiser

router = APIRouter()


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment_data: PaymentCreate,
    current_user: SessionUser = Depends(require_advertiser),
    db: Session = Depends(get_db)
):
    return PaymentService.create_payment(db, current_user, payment_data)


@router.get("", response_model=List[PaymentResponse])
async def list_payments(
    current_user: SessionUser = Depends(require_authenticated),
    db: Session = Depends(get_db)
):
    return PaymentService.list_for_user(db, current_user)


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    intent_data: PaymentIntentCreate,
    current_user: SessionUser = Depends(require_advertiser),
    gateway: StripeGateway = Depends(get_payment_gateway),
    db: Session = Depends(get_db)
):
    client_secret = PaymentService.create_payment_intent(db, gateway, current_user, intent_data)
    return PaymentIntentResponse(client_secret=client_secret)


@router.post("/process", response_model=PaymentProcessResponse)
async def process_payment(
    process_data: PaymentProcess,
    current_user: SessionUser = Depends(require_advertiser),
    gateway: StripeGateway = Depends(get_payment_gateway),
    db: Session = Depends(get_db)
):
    """Charge a campaign budget; a declined charge answers 400 with success false"""
    result = PaymentProcessResponse(**PaymentService.process_payment(db, gateway, current_user, process_data))
    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=result.dict(by_alias=True)
        )
    return result
