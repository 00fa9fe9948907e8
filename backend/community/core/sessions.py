"""Redis client and read-only access to sessions issued by the identity service."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from datetime import datetime

from community.core.config import settings
from community.core.logger import logger

try:
    import redis

    REDIS_AVAILABLE = True
except ImportError:
    REDIS_AVAILABLE = False


redis_client: redis.Redis | None = None


@dataclass
class SessionData:
    """Server-side session data."""

    user_id: int
    created_at: datetime
    last_activity: datetime

    @staticmethod
    def from_dict(data: dict) -> SessionData:
        """Create from dictionary."""
        return SessionData(
            user_id=data["user_id"],
            created_at=datetime.fromisoformat(data["created_at"]),
            last_activity=datetime.fromisoformat(data["last_activity"]),
        )


def _get_redis_client() -> redis.Redis:
    """
    Lazy initialization of Redis client.
    Each worker process will initialize on first use.
    """
    global redis_client

    if redis_client is not None:
        return redis_client

    if not REDIS_AVAILABLE:
        raise RuntimeError("Redis library is not installed")

    last_error = None
    for attempt in range(1, 6):
        try:
            client = redis.from_url(settings.REDIS_URL, decode_responses=True)
            client.ping()
            redis_client = client
            logger.info(f"Connected to Redis (attempt {attempt})")
            return redis_client
        except Exception as exc:
            last_error = exc
            logger.warning(
                f"Redis connection attempt {attempt}/5 failed",
                extra={"error": str(exc)},
            )
            if attempt < 5:
                time.sleep(2.0)

    # All retries failed
    logger.critical(
        "Could not connect to Redis after 5 attempts",
        extra={"redis_url": settings.REDIS_URL, "error": str(last_error)},
    )
    raise RuntimeError(f"Redis connection failed: {last_error}")


def init_redis() -> None:
    """
    Initialize Redis connection with retry logic.
    """
    _get_redis_client()


def get_session(session_id: str) -> SessionData | None:
    """
    Get session data by session ID.

    Expiry is enforced by the key TTL set by the identity service.

    Returns:
        SessionData if the key exists, None otherwise
    """
    client = _get_redis_client()
    data = client.get(settings.REDIS_SESSION_PREFIX + session_id)

    if data is None:
        return None

    return SessionData.from_dict(json.loads(data))
