"""
Campaign payments through the Stripe REST API
"""

import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, Optional, List

import requests
from sqlalchemy.orm import Session

from config import settings
from app.models.user import UserRole
from app.models.campaign import CampaignStatus
from app.models.payment import Payment, PaymentStatus
from app.schemas.user import SessionUser
from app.schemas.payment import PaymentCreate, PaymentIntentCreate, PaymentProcess
from app.services.campaign_service import CampaignService
from app.utils.exceptions import PaymentGatewayError, PaymentGatewayUnavailable

logger = logging.getLogger(__name__)


class StripeGateway:
    """Thin client for the payment intent endpoints"""

    def __init__(self, secret_key: Optional[str], api_base: str, timeout: int = 30):
        self.secret_key = secret_key
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "StripeGateway":
        return cls(settings.STRIPE_SECRET_KEY, settings.STRIPE_API_BASE, settings.PAYMENT_TIMEOUT)

    @property
    def configured(self) -> bool:
        return bool(self.secret_key)

    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: Dict[str, str],
        payment_method: Optional[str] = None,
        confirm: bool = False,
        return_url: Optional[str] = None
    ) -> Dict[str, Any]:
        """Create (and optionally confirm) a payment intent; amount is in the minor unit"""
        if not self.configured:
            raise PaymentGatewayUnavailable()

        payload = {"amount": amount, "currency": currency}
        for key, value in metadata.items():
            payload[f"metadata[{key}]"] = value
        if payment_method:
            payload["payment_method"] = payment_method
        if confirm:
            payload["confirm"] = "true"
        if return_url:
            payload["return_url"] = return_url

        headers = {"Authorization": f"Bearer {self.secret_key}"}

        try:
            response = requests.post(
                f"{self.api_base}/payment_intents",
                headers=headers,
                data=payload,
                timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            message = "Payment provider rejected the request"
            try:
                message = e.response.json().get("error", {}).get("message") or message
            except ValueError:
                pass
            logger.error(f"Stripe returned {e.response.status_code}: {message}")
            raise PaymentGatewayError(message)
        except requests.exceptions.RequestException as e:
            logger.error(f"Stripe request failed: {e}")
            raise PaymentGatewayError(f"Network error: {str(e)}")
        except ValueError:
            raise PaymentGatewayError("Invalid response from payment provider")


payment_gateway = StripeGateway.from_settings()


def get_payment_gateway() -> StripeGateway:
    """FastAPI dependency returning the shared gateway client"""
    return payment_gateway


class PaymentService:
    """Payment bookkeeping and checkout"""

    @staticmethod
    def to_minor_units(amount: Decimal) -> int:
        return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @staticmethod
    def create_payment(db: Session, current_user: SessionUser, payment_data: PaymentCreate) -> Payment:
        campaign = CampaignService.get_campaign(db, payment_data.campaign_id)
        CampaignService.ensure_manageable(campaign, current_user)

        payment = Payment(
            campaign_id=campaign.id,
            advertiser_id=current_user.id,
            amount=payment_data.amount,
            status=payment_data.status.value,
            payment_method=payment_data.payment_method,
            transaction_id=payment_data.transaction_id
        )
        if payment_data.status == PaymentStatus.COMPLETED:
            payment.processed_at = datetime.utcnow()

        db.add(payment)
        db.commit()
        db.refresh(payment)

        logger.info(f"Payment {payment.id} of {payment.amount} recorded for campaign {campaign.id}")
        return payment

    @staticmethod
    def list_for_user(db: Session, current_user: SessionUser) -> List[Payment]:
        query = db.query(Payment).order_by(Payment.created_at.desc(), Payment.id.desc())
        if current_user.role == UserRole.ADMIN:
            return query.all()
        elif current_user.role == UserRole.ADVERTISER:
            return query.filter(Payment.advertiser_id == current_user.id).all()
        return []

    @staticmethod
    def create_payment_intent(
        db: Session,
        gateway: StripeGateway,
        current_user: SessionUser,
        intent_data: PaymentIntentCreate
    ) -> str:
        """Returns the client secret the browser needs to finish the payment"""
        if not gateway.configured:
            raise PaymentGatewayUnavailable()

        campaign = CampaignService.get_campaign(db, intent_data.campaign_id)
        CampaignService.ensure_manageable(campaign, current_user)

        intent = gateway.create_payment_intent(
            amount=PaymentService.to_minor_units(intent_data.amount),
            currency=intent_data.currency or settings.PAYMENT_CURRENCY,
            metadata={
                "campaignId": str(campaign.id),
                "advertiserId": str(current_user.id)
            }
        )
        logger.info(f"Payment intent {intent.get('id')} created for campaign {campaign.id}")
        return intent["client_secret"]

    @staticmethod
    def process_payment(
        db: Session,
        gateway: StripeGateway,
        current_user: SessionUser,
        process_data: PaymentProcess
    ) -> Dict[str, Any]:
        """Charge the campaign budget.

        A succeeded charge activates the campaign and stores a completed payment
        in the same commit. Any other intent status leaves the database untouched.
        """
        if not gateway.configured:
            raise PaymentGatewayUnavailable()

        campaign = CampaignService.get_campaign(db, process_data.campaign_id)
        CampaignService.ensure_manageable(campaign, current_user)

        intent = gateway.create_payment_intent(
            amount=process_data.amount,
            currency=settings.PAYMENT_CURRENCY,
            metadata={
                "campaignId": str(campaign.id),
                "advertiserId": str(current_user.id)
            },
            payment_method=process_data.payment_method_id,
            confirm=True,
            return_url=f"{settings.FRONTEND_URL}/campaigns"
        )

        if intent.get("status") != "succeeded":
            logger.warning(f"Payment intent {intent.get('id')} for campaign {campaign.id} ended as {intent.get('status')}")
            return {"success": False, "message": "Payment could not be completed", "payment_intent": intent.get("id")}

        CampaignService.set_status(campaign, CampaignStatus.ACTIVE)
        payment = Payment(
            campaign_id=campaign.id,
            advertiser_id=current_user.id,
            amount=Decimal(process_data.amount) / 100,
            status=PaymentStatus.COMPLETED.value,
            payment_method="stripe",
            transaction_id=intent.get("id"),
            processed_at=datetime.utcnow()
        )
        db.add(payment)
        db.commit()

        logger.info(f"Campaign {campaign.id} paid via {intent.get('id')} and activated")
        return {"success": True, "message": "Payment completed", "payment_intent": intent.get("id")}
