"""
Revoked session token store backed by Redis
"""

import logging
import time
from typing import Optional, Dict, Any

import redis

from config import settings
from app.utils.exceptions import SessionStoreError

logger = logging.getLogger(__name__)


class SessionStore:
    """Keeps logged-out token ids until the token would have expired anyway.

    Without Redis, tokens are stateless: logout only asks the client to drop its token.
    """

    KEY_PREFIX = "revoked_token:"

    def __init__(self, redis_client: Optional[redis.Redis] = None):
        self.redis = redis_client

    @classmethod
    def from_settings(cls) -> "SessionStore":
        if not settings.REDIS_ENABLED:
            return cls(None)
        return cls(redis.from_url(settings.REDIS_URL, decode_responses=True, socket_connect_timeout=5))

    def revoke(self, payload: Dict[str, Any]) -> bool:
        """Revoke the token described by ``payload``; True when the revocation was stored"""
        if self.redis is None:
            logger.info(f"Session store disabled; token for user {payload.get('sub')} not tracked")
            return False

        ttl = max(int(payload.get("exp", 0) - time.time()), 1)
        try:
            self.redis.setex(f"{self.KEY_PREFIX}{payload['jti']}", ttl, payload.get("sub", ""))
        except redis.RedisError as e:
            logger.error(f"Failed to revoke token for user {payload.get('sub')}: {e}")
            raise SessionStoreError()
        return True

    def is_revoked(self, jti: str) -> bool:
        if self.redis is None:
            return False
        try:
            return bool(self.redis.exists(f"{self.KEY_PREFIX}{jti}"))
        except redis.RedisError as e:
            # Fail open - a Redis outage must not lock every user out
            logger.error(f"Revocation lookup failed: {e}")
            return False


session_store = SessionStore.from_settings()


def get_session_store() -> SessionStore:
    """FastAPI dependency returning the process-wide session store"""
    return session_store
