"""Admin service for authentication and session tokens."""
import logging
import secrets
from datetime import datetime, timedelta
from threading import Lock
from typing import Dict, Optional

from event_registration.config import (
    get_admin_password,
    get_admin_username,
    get_session_ttl_minutes,
)
from event_registration.models.admin import AdminCredentials, AdminSession
from event_registration.utils.date_utils import now_local
from event_registration.utils.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

_sessions: Dict[str, AdminSession] = {}
_SESSIONS_LOCK = Lock()


def _clear_sessions() -> None:
    """Revoke every issued token."""
    with _SESSIONS_LOCK:
        _sessions.clear()


def _purge_expired(now: datetime) -> None:
    """Drop expired sessions; caller must hold _SESSIONS_LOCK."""
    expired = [token for token, session in _sessions.items() if session.is_expired(now)]
    for token in expired:
        del _sessions[token]


def authenticate_admin(username: str, password: str) -> bool:
    """
    Authenticate admin credentials.

    Args:
        username: Admin username
        password: Admin password

    Returns:
        True if credentials valid, False otherwise

    Behavior:
        - Loads credentials from environment variables (and .env)
        - Constant-time comparison
        - Always fails while ADMIN_PASSWORD is unset
    """
    credentials = AdminCredentials(
        username=get_admin_username(),
        password=get_admin_password()
    )

    if not credentials.password:
        logger.warning("ADMIN_PASSWORD is not configured; admin login disabled")
        return False

    return credentials.matches(username, password)


def login_admin(username: str, password: str) -> str:
    """
    Log in admin user.

    Returns:
        A new random session token valid for ADMIN_SESSION_TTL_MINUTES

    Behavior:
        - Expired sessions are purged whenever a new one is issued

    Raises:
        AuthenticationError: If the credentials are wrong
    """
    if not authenticate_admin(username, password):
        logger.warning(f"Failed admin login for username {username!r}")
        raise AuthenticationError("Invalid credentials")

    token = secrets.token_urlsafe(32)
    now = now_local()
    expires_at = now + timedelta(minutes=get_session_ttl_minutes())

    with _SESSIONS_LOCK:
        _purge_expired(now)
        _sessions[token] = AdminSession(token=token, expires_at=expires_at)

    logger.info("Admin logged in")
    return token


def authorize(token: Optional[str], now: Optional[datetime] = None) -> bool:
    """
    Check whether a session token is valid.

    Returns:
        True if the token was issued, is not revoked and has not expired

    Behavior:
        - Expired tokens are dropped when checked
    """
    if not token:
        return False

    with _SESSIONS_LOCK:
        session = _sessions.get(token)
        if session is None:
            return False

        if session.is_expired(now):
            del _sessions[token]
            return False

    return True


def require_admin(token: Optional[str]) -> None:
    """Raise AuthenticationError unless ``token`` is authorized."""
    if not authorize(token):
        raise AuthenticationError("Missing, invalid or expired admin session")


def logout_admin(token: Optional[str]) -> None:
    """
    Log out admin user.

    Behavior:
        - Revokes the token
        - Unknown tokens are ignored
    """
    if not token:
        return

    with _SESSIONS_LOCK:
        _sessions.pop(token, None)
