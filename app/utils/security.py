"""
Access-control dependencies.

Every gated route depends on ``require_authenticated`` (directly or through
``require_role``), so the authentication check always runs before the role check
and both run before any resource is looked up.
"""

import logging
from typing import Dict, Any, Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from database import get_db
from app.models.user import User, UserRole
from app.schemas.user import SessionUser
from app.services.auth_service import AuthService
from app.services.session_service import SessionStore, get_session_store
from app.utils.exceptions import Unauthenticated, Forbidden

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our 401 rather than FastAPI's default
security = HTTPBearer(auto_error=False)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: SessionStore = Depends(get_session_store)
) -> Dict[str, Any]:
    """Decode the bearer token; revoked tokens count as missing"""
    if credentials is None:
        raise Unauthenticated()

    payload = AuthService.verify_token(credentials.credentials)
    if not payload or store.is_revoked(payload["jti"]):
        raise Unauthenticated("Invalid or expired session")

    return payload


def require_authenticated(
    payload: Dict[str, Any] = Depends(get_token_payload),
    db: Session = Depends(get_db)
) -> SessionUser:
    """Resolve the session user; inactive or deleted accounts are unauthenticated"""
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid session")

    user = db.query(User).filter(User.id == user_id).first()
    if not user or not user.is_active:
        raise Unauthenticated("User not found or inactive")

    return AuthService.to_session_user(user)


def require_role(*allowed_roles: UserRole):
    """Build a dependency admitting only sessions whose role is in ``allowed_roles``"""
    allowed = frozenset(allowed_roles)

    def role_checker(current_user: SessionUser = Depends(require_authenticated)) -> SessionUser:
        if current_user.role not in allowed:
            logger.warning(
                f"User {current_user.id} with role {current_user.role.value} denied; "
                f"requires one of {sorted(r.value for r in allowed)}"
            )
            raise Forbidden()
        return current_user

    return role_checker


# Common gates
require_admin = require_role(UserRole.ADMIN)
require_partner = require_role(UserRole.PARTNER)
require_advertiser = require_role(UserRole.ADVERTISER)
require_campaign_manager = require_role(UserRole.ADVERTISER, UserRole.ADMIN)
