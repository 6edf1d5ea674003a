"""
PyTest configuration and fixtures
"""

import os
import sys
from datetime import datetime, timedelta
from decimal import Decimal

# Test settings must be in place before config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("STRIPE_SECRET_KEY", "")

# Add the parent directory to the path so we can import modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from app.models.user import User, UserRole
from app.models.campaign import Campaign, CampaignStatus
from app.services.auth_service import AuthService
from app.services.payment_service import get_payment_gateway

TEST_PASSWORD = "password123"


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """Test client sharing the test session with the app"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    """Factory inserting users directly, admins included"""
    counter = {"n": 0}

    def _make_user(role: UserRole, email: str = None, is_active: bool = True, **fields) -> User:
        counter["n"] += 1
        user = User(
            email=email or f"{role.value}{counter['n']}@example.com",
            password_hash=AuthService.hash_password(TEST_PASSWORD),
            role=role,
            is_active=is_active,
            **fields
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def admin_user(make_user):
    return make_user(UserRole.ADMIN, email="admin@example.com")


@pytest.fixture
def advertiser_user(make_user):
    return make_user(UserRole.ADVERTISER, email="advertiser@example.com", company_name="Acme Foods")


@pytest.fixture
def partner_user(make_user):
    return make_user(UserRole.PARTNER, email="partner@example.com")


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {AuthService.create_access_token(user)}"}


@pytest.fixture
def headers_for():
    """Bearer headers for any user"""
    return auth_headers


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def advertiser_headers(advertiser_user):
    return auth_headers(advertiser_user)


@pytest.fixture
def partner_headers(partner_user):
    return auth_headers(partner_user)


@pytest.fixture
def make_campaign(db_session):
    """Factory inserting campaigns with an open recruitment window by default"""
    def _make_campaign(advertiser: User, **fields) -> Campaign:
        now = datetime.utcnow()
        values = {
            "title": "Spring sampler",
            "category": "food",
            "daily_budget": Decimal("10000"),
            "total_budget": Decimal("300000"),
            "recruitment_start_date": now - timedelta(days=1),
            "recruitment_end_date": now + timedelta(days=7),
            "campaign_start_date": now + timedelta(days=8),
            "campaign_end_date": now + timedelta(days=38),
            "status": CampaignStatus.RECRUITING.value,
        }
        values.update(fields)
        campaign = Campaign(advertiser_id=advertiser.id, **values)
        db_session.add(campaign)
        db_session.commit()
        db_session.refresh(campaign)
        return campaign

    return _make_campaign


@pytest.fixture
def mock_gateway():
    """Configured payment gateway whose calls never leave the process"""
    gateway = Mock()
    gateway.configured = True
    gateway.create_payment_intent.return_value = {
        "id": "pi_test_123",
        "status": "succeeded",
        "client_secret": "pi_test_123_secret_abc"
    }
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield gateway
    app.dependency_overrides.pop(get_payment_gateway, None)


@pytest.fixture
def sample_campaign_payload():
    """Campaign creation body as the dashboard sends it"""
    return {
        "title": "Organic granola launch",
        "description": "Tasting campaign for the new granola line",
        "category": "food",
        "dailyBudget": "50000",
        "totalBudget": "1500000",
        "targetFilters": {"ages": ["20s", "30s"], "regions": ["Seoul"]},
        "recruitmentStartDate": "2026-11-01T00:00:00Z",
        "recruitmentEndDate": "2026-11-10T00:00:00Z",
        "campaignStartDate": "2026-11-15T00:00:00Z",
        "campaignEndDate": "2026-12-15T00:00:00Z",
        "maxPartners": "5"
    }
