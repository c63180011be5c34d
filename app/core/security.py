"""
Session resolution from bearer tokens.

The storefront only needs to know whether a caller is signed in and which
role they hold. Tokens are HS256 JWTs with ``sub`` and ``role`` claims.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from fastapi import Header
from jose import JWTError, jwt

from app.config.settings import get_settings
from app.schemas import Session, SessionUser

logger = logging.getLogger(__name__)


def create_access_token(user_id: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a session token (used by admin scripts and tests)."""
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.auth_token_expire_minutes)
    )
    claims = {"sub": user_id, "role": role, "exp": expire}
    return jwt.encode(claims, settings.auth_secret_key, algorithm=settings.auth_algorithm)


def decode_session(token: str) -> Optional[Session]:
    """Decode a token into a session, or ``None`` if it is not valid."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.auth_secret_key, algorithms=[settings.auth_algorithm])
    except JWTError as e:
        logger.warning(f"Rejected session token: {e}")
        return None

    user_id = payload.get("sub")
    role = payload.get("role")
    if not user_id or not role:
        logger.warning("Session token missing required claims")
        return None
    return Session(user=SessionUser(id=user_id, role=role))


async def get_session(authorization: Optional[str] = Header(default=None)) -> Optional[Session]:
    """FastAPI dependency resolving the caller's session, if any."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return decode_session(token.strip())
