"""Unit tests for admin_service."""
from datetime import timedelta

import pytest

from event_registration.services import admin_service
from event_registration.services.admin_service import (
    authenticate_admin,
    authorize,
    login_admin,
    logout_admin,
    require_admin,
)
from event_registration.utils.date_utils import now_local
from event_registration.utils.exceptions import AuthenticationError


@pytest.fixture(autouse=True)
def admin_env(monkeypatch):
    """Configure admin credentials and start without sessions."""
    monkeypatch.setenv("ADMIN_USERNAME", "testadmin")
    monkeypatch.setenv("ADMIN_PASSWORD", "testpass")
    monkeypatch.delenv("ADMIN_SESSION_TTL_MINUTES", raising=False)
    admin_service._clear_sessions()
    yield
    admin_service._clear_sessions()


class TestAuthenticateAdmin:
    """Test authenticate_admin function."""

    def test_authenticate_with_correct_credentials(self):
        """Test authentication succeeds with correct credentials."""
        assert authenticate_admin("testadmin", "testpass") is True

    def test_authenticate_with_wrong_username(self):
        """Test authentication fails with wrong username."""
        assert authenticate_admin("wronguser", "testpass") is False

    def test_authenticate_with_wrong_password(self):
        """Test authentication fails with wrong password."""
        assert authenticate_admin("testadmin", "wrongpass") is False

    def test_authenticate_with_empty_credentials(self):
        """Test authentication fails with empty credentials."""
        assert authenticate_admin("", "") is False

    def test_authenticate_uses_default_username(self, monkeypatch):
        """Test authentication uses default username if not set."""
        monkeypatch.delenv("ADMIN_USERNAME", raising=False)
        assert authenticate_admin("admin", "testpass") is True

    def test_unset_password_disables_login(self, monkeypatch):
        """Test login is disabled while no password is configured."""
        monkeypatch.setenv("ADMIN_PASSWORD", "")
        assert authenticate_admin("testadmin", "") is False


class TestLoginAdmin:
    """Test login_admin function."""

    def test_login_success_returns_token(self):
        """Test successful login returns an authorized token."""
        token = login_admin("testadmin", "testpass")

        assert isinstance(token, str)
        assert len(token) >= 32
        assert authorize(token) is True

    def test_login_failure_raises(self):
        """Test wrong credentials raise AuthenticationError."""
        with pytest.raises(AuthenticationError):
            login_admin("admin", "wrong")

    def test_each_login_gets_new_token(self):
        """Test every login issues a distinct token."""
        first = login_admin("testadmin", "testpass")
        second = login_admin("testadmin", "testpass")

        assert first != second
        assert authorize(first) and authorize(second)


class TestAuthorize:
    """Test authorize and require_admin functions."""

    @pytest.mark.parametrize("token", [None, "", "admin-session-token"])
    def test_unknown_tokens_rejected(self, token):
        """Test tokens that were never issued are refused."""
        assert authorize(token) is False

    def test_expired_token_rejected_and_purged(self):
        """Test an expired token is refused and removed."""
        token = login_admin("testadmin", "testpass")
        later = now_local() + timedelta(minutes=61)

        assert authorize(token, now=later) is False
        assert token not in admin_service._sessions
        assert authorize(token) is False

    def test_login_purges_expired_sessions(self):
        """Test issuing a token drops sessions that have already expired."""
        stale = login_admin("testadmin", "testpass")
        admin_service._sessions[stale].expires_at = now_local() - timedelta(seconds=1)

        fresh = login_admin("testadmin", "testpass")

        assert stale not in admin_service._sessions
        assert fresh in admin_service._sessions

    def test_ttl_from_environment(self, monkeypatch):
        """Test token lifetime comes from the environment."""
        monkeypatch.setenv("ADMIN_SESSION_TTL_MINUTES", "5")
        token = login_admin("testadmin", "testpass")

        assert authorize(token, now=now_local() + timedelta(minutes=4)) is True
        assert authorize(token, now=now_local() + timedelta(minutes=6)) is False

    def test_require_admin_raises_for_invalid_token(self):
        """Test require_admin raises for an invalid token."""
        with pytest.raises(AuthenticationError):
            require_admin("bogus")

    def test_require_admin_accepts_valid_token(self):
        """Test require_admin passes for a valid token."""
        require_admin(login_admin("testadmin", "testpass"))


class TestLogoutAdmin:
    """Test logout_admin function."""

    def test_logout_revokes_token(self):
        """Test logout revokes the token."""
        token = login_admin("testadmin", "testpass")

        logout_admin(token)

        assert authorize(token) is False

    def test_logout_leaves_other_sessions(self):
        """Test logout only revokes its own token."""
        first = login_admin("testadmin", "testpass")
        second = login_admin("testadmin", "testpass")

        logout_admin(first)

        assert authorize(second) is True

    @pytest.mark.parametrize("token", [None, "", "unknown"])
    def test_logout_unknown_token_is_noop(self, token):
        """Test logout works even for unknown tokens."""
        logout_admin(token)
