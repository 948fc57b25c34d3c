"""Unit tests for login, logout and the current actor."""

import pytest

from marketplace.exceptions import ForbiddenError, UnauthenticatedError
from marketplace.models import Role


def last_entry(audit_service):
    return audit_service.get_history()[-1]


class TestLogin:
    def test_failed_then_successful_login(self, auth_service, audit_service):
        assert auth_service.login("admin", "wrong") is None
        assert auth_service.get_current_user() is None

        history = audit_service.get_history()
        assert len(history) == 1
        assert "LOGIN_FAILURE" in history[0]
        assert "Actor: [SYSTEM]" in history[0]

        user = auth_service.login("admin", "correct")
        assert user is not None
        assert auth_service.get_current_user() == user

        history = audit_service.get_history()
        assert len(history) == 2
        assert "LOGIN_SUCCESS" in history[1]
        assert "Actor: [admin]" in history[1]

    def test_unknown_user(self, auth_service, audit_service):
        assert auth_service.login("ghost", "correct") is None

        assert not auth_service.is_authenticated()
        assert "LOGIN_FAILURE: username=ghost" in last_entry(audit_service)

    def test_roles(self, auth_service):
        auth_service.login("alice", "secret")
        assert auth_service.is_authenticated()
        assert not auth_service.is_admin()

        auth_service.login("admin", "correct")
        assert auth_service.is_admin()
        assert auth_service.get_current_user().role == Role.ADMIN

    def test_successful_login_replaces_current_actor(self, auth_service):
        auth_service.login("alice", "secret")
        auth_service.login("admin", "correct")

        assert auth_service.get_current_user().username == "admin"

    def test_failed_login_keeps_current_actor(self, auth_service, audit_service):
        auth_service.login("alice", "secret")

        assert auth_service.login("admin", "wrong") is None

        assert auth_service.get_current_user().username == "alice"
        assert "Actor: [alice]" in last_entry(audit_service)


class TestLogout:
    def test_logout_audited_as_departing_user(self, auth_service, audit_service):
        auth_service.login("alice", "secret")
        auth_service.logout()

        assert auth_service.get_current_user() is None
        entry = last_entry(audit_service)
        assert "LOGOUT" in entry
        assert "Actor: [alice]" in entry

    def test_logout_when_empty_is_noop(self, auth_service, audit_service):
        auth_service.logout()

        assert audit_service.get_history() == []


class TestGuards:
    def test_require_authenticated(self, auth_service):
        with pytest.raises(UnauthenticatedError):
            auth_service.require_authenticated()

        auth_service.login("alice", "secret")
        assert auth_service.require_authenticated().username == "alice"

    def test_require_admin(self, auth_service):
        with pytest.raises(UnauthenticatedError):
            auth_service.require_admin()

        auth_service.login("alice", "secret")
        with pytest.raises(ForbiddenError):
            auth_service.require_admin()

        auth_service.login("admin", "correct")
        assert auth_service.require_admin().username == "admin"
