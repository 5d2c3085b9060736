"""Admin data model."""
import secrets
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class AdminCredentials:
    """Configured administrator identity."""

    username: str
    password: str = field(repr=False)

    def matches(self, username: str, password: str) -> bool:
        """Compare submitted credentials in constant time; an unset password never matches."""
        if not self.password:
            return False

        username_ok = secrets.compare_digest(
            (username or "").encode("utf-8"), self.username.encode("utf-8")
        )
        password_ok = secrets.compare_digest(
            (password or "").encode("utf-8"), self.password.encode("utf-8")
        )
        return username_ok and password_ok


@dataclass
class AdminSession:
    """Issued admin session token and its expiry."""

    token: str
    expires_at: datetime

    def is_expired(self, now: datetime = None) -> bool:
        now = now or datetime.now().astimezone()
        return now >= self.expires_at
