"""
Authentication Service
Single-session login/logout; holds the current actor.
"""

import hmac
import logging
import threading
from typing import Optional

from ..exceptions import ForbiddenError, UnauthenticatedError
from ..models import Role, User
from ..repositories import UserRepository
from .audit_service import AuditService
from .instrumentation import log_execution_time

logger = logging.getLogger(__name__)

LOG_LOGIN_SUCCESS = "LOGIN_SUCCESS"
LOG_LOGIN_FAILURE = "LOGIN_FAILURE"
LOG_LOGOUT = "LOGOUT"


class AuthService:
    """
    Authentication and process-wide actor context.

    States: empty, or authenticated as one user. A successful login while
    already authenticated replaces the current actor. A failed login never
    changes it.

    Writers (login/logout) are serialized by a lock; the actor slot is a
    single reference, so readers always see a whole user or nothing.
    """

    def __init__(self, user_repository: UserRepository, audit_service: AuditService):
        self._users = user_repository
        self._audit = audit_service
        self._current_user: Optional[User] = None
        self._lock = threading.Lock()

    @log_execution_time
    def login(self, username: str, password: str) -> Optional[User]:
        """
        Authenticate and make the user the current actor.

        Returns:
            The user on success, None on bad credentials
        """
        user = self._users.find_by_username(username)

        with self._lock:
            if user is None or not _credentials_match(user.password, password):
                logger.warning(f"Login failed for username '{username}'")
                self._audit.log_action(f"{LOG_LOGIN_FAILURE}: username={username}")
                return None

            previous = self._current_user
            self._current_user = user
            self._audit.log_action(LOG_LOGIN_SUCCESS)

        if previous is not None and previous != user:
            logger.info(f"Actor '{previous.username}' replaced by '{user.username}'")
        logger.info(f"User '{user.username}' logged in")
        return user

    @log_execution_time
    def logout(self) -> None:
        """Clear the current actor. The logout is audited under the departing user."""
        with self._lock:
            user = self._current_user
            if user is None:
                return
            self._audit.log_action(LOG_LOGOUT)
            self._current_user = None

        logger.info(f"User '{user.username}' logged out")

    def get_current_user(self) -> Optional[User]:
        return self._current_user

    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def is_admin(self) -> bool:
        user = self._current_user
        return user is not None and user.role == Role.ADMIN

    def require_authenticated(self) -> User:
        """
        Raises:
            UnauthenticatedError: If nobody is logged in
        """
        user = self._current_user
        if user is None:
            raise UnauthenticatedError()
        return user

    def require_admin(self) -> User:
        """
        Raises:
            UnauthenticatedError: If nobody is logged in
            ForbiddenError: If the current actor is not an administrator
        """
        user = self.require_authenticated()
        if user.role != Role.ADMIN:
            raise ForbiddenError()
        return user


def _credentials_match(stored: str, supplied: str) -> bool:
    return hmac.compare_digest(stored.encode("utf-8"), supplied.encode("utf-8"))
