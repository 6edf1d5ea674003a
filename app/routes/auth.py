"""
Authentication routes: signup, login, logout and the current session
"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session
import logging

from database import get_db
from app.schemas.user import (
    UserCreate, UserLogin, SessionUser, AuthResponse, SignupResponse, MeResponse
)
from app.services.auth_service import AuthService
from app.services.session_service import SessionStore, get_session_store
from app.utils.exceptions import ValidationFailed, Unauthenticated
from app.utils.security import get_token_payload, require_authenticated

router = APIRouter()
logger = logging.getLogger(__name__)


def _signup_error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": message}
    )


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    """Create an account and open a session for it"""
    try:
        user_data = UserCreate(**payload)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(part) for part in first_error.get("loc", ()))
        return _signup_error(f"Invalid signup data: {field} {first_error.get('msg', '')}".strip())

    try:
        user = AuthService.create_user(db, user_data)
    except ValidationFailed as e:
        return _signup_error(e.message)

    return SignupResponse(
        success=True,
        message="Signup completed",
        user=AuthService.to_session_user(user),
        access_token=AuthService.create_access_token(user)
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
):
    """Exchange email and password for an access token"""
    if not credentials.email or not credentials.password:
        raise ValidationFailed("Email and password are required")

    user = AuthService.authenticate(db, credentials.email, credentials.password)
    if not user:
        raise Unauthenticated("Invalid email or password")
    if not user.is_active:
        logger.warning(f"Inactive user {user.id} attempted to log in")
        raise Unauthenticated("Account is deactivated")

    logger.info(f"User {user.id} logged in")
    return AuthResponse(
        user=AuthService.to_session_user(user),
        access_token=AuthService.create_access_token(user)
    )


@router.post("/logout")
async def logout(
    payload: Dict[str, Any] = Depends(get_token_payload),
    store: SessionStore = Depends(get_session_store)
):
    """Revoke the presented token; the client discards it either way"""
    store.revoke(payload)
    logger.info(f"User {payload.get('sub')} logged out")
    return {"message": "Logged out"}


@router.get("/me", response_model=MeResponse)
async def me(current_user: SessionUser = Depends(require_authenticated)):
    return MeResponse(user=current_user)
