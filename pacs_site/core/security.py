"""Password hashing and signed session cookies."""

import logging
import secrets
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from pacs_site.core.config import settings

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 10

USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128

# Bytes of entropy in an opaque session id.
SESSION_ID_BYTES = 32


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def resolve_session_secret() -> str:
    """
    Return the cookie signing secret.

    Without SESSION_SECRET (dev only; prod refuses to start) a random secret is
    generated for this process, so sessions do not survive a restart.
    """
    if settings.SESSION_SECRET is not None:
        return settings.SESSION_SECRET.get_secret_value()
    logger.warning(
        "SESSION_SECRET is not set; using a random per-process secret. "
        "Admin sessions will be invalidated on restart."
    )
    return secrets.token_urlsafe(SESSION_ID_BYTES)


def new_session_id() -> str:
    """Opaque, unguessable identifier for a server-side session record."""
    return secrets.token_urlsafe(SESSION_ID_BYTES)


def session_expiry(now: datetime | None = None) -> datetime:
    now = now or datetime.now(UTC)
    return now + timedelta(hours=settings.SESSION_TTL_HOURS)


def create_session_cookie(session_id: str, expires_at: datetime) -> str:
    """Sign the session id into a cookie value (JWT with sid, exp, iat)."""
    payload: dict[str, Any] = {
        "sid": session_id,
        "exp": expires_at,
        "iat": datetime.now(UTC),
    }
    return jwt.encode(
        payload,
        resolve_session_secret(),
        algorithm=settings.SESSION_ALGORITHM,
    )


def decode_session_cookie(token: str) -> str:
    """
    Verify a cookie value and return its session id.
    Raises jwt.PyJWTError on a tampered, expired or malformed cookie.
    """
    payload = jwt.decode(
        token,
        resolve_session_secret(),
        algorithms=[settings.SESSION_ALGORITHM],
    )
    sid = payload.get("sid")
    if not isinstance(sid, str) or not sid:
        raise jwt.InvalidTokenError("Session cookie has no sid claim")
    return sid
