"""
Authentication service: password hashing, session tokens and account creation
"""

import uuid
import logging
from datetime import datetime, timedelta
from typing import Optional, Dict, Any
from passlib.context import CryptContext
from jose import jwt
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from config import settings
from app.models.user import User, UserRole
from app.schemas.user import UserCreate, SessionUser
from app.utils.exceptions import ValidationFailed

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)

# Logger
logger = logging.getLogger(__name__)


class AuthService:
    """Authentication and account service"""

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password"""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash"""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def create_access_token(user: User) -> str:
        """Create a session token for the user"""
        expire = datetime.utcnow() + timedelta(hours=settings.JWT_ACCESS_TOKEN_EXPIRE_HOURS)
        to_encode = {
            "sub": str(user.id),
            "role": user.role.value,
            "jti": uuid.uuid4().hex,
            "exp": expire,
            "type": "access"
        }
        return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    @staticmethod
    def verify_token(token: str) -> Optional[Dict[str, Any]]:
        """Verify and decode a session token; None when invalid or expired"""
        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET_KEY,
                algorithms=[settings.JWT_ALGORITHM]
            )
        except jwt.ExpiredSignatureError:
            return None
        except jwt.JWTError:
            return None

        if payload.get("type") != "access" or not payload.get("sub") or not payload.get("jti"):
            return None
        return payload

    @staticmethod
    def to_session_user(user: User) -> SessionUser:
        return SessionUser(
            id=user.id,
            email=user.email,
            role=user.role,
            company_name=user.company_name
        )

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email.lower()).first()

    @staticmethod
    def create_user(db: Session, user_data: UserCreate) -> User:
        """Create a new account; the role is fixed from here on"""
        if user_data.role == UserRole.ADMIN and not settings.ALLOW_ADMIN_SIGNUP:
            raise ValidationFailed("Admin accounts cannot be created through signup")

        if AuthService.get_user_by_email(db, user_data.email):
            raise ValidationFailed("Email is already registered")

        fields = user_data.dict(exclude={"password"})
        user = User(password_hash=AuthService.hash_password(user_data.password), **fields)

        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Concurrent signup with the same email
            db.rollback()
            raise ValidationFailed("Email is already registered")
        db.refresh(user)

        logger.info(f"User {user.id} registered as {user.role.value}")
        return user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> Optional[User]:
        """Return the user for valid credentials, otherwise None"""
        user = AuthService.get_user_by_email(db, email)
        if not user or not AuthService.verify_password(password, user.password_hash):
            return None
        return user
