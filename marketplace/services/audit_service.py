"""
Audit Service
Formats and appends audit trail entries attributed to the current actor.

The actor source is wired late (see ``marketplace.container``): until
``bind_actor_provider`` is called every entry is attributed to ``SYSTEM``.
"""

import logging
from typing import List, Optional, Protocol

from ..exceptions import WiringError
from ..models import AuditEntry, User
from ..repositories import AuditRepository

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "SYSTEM"


class ActorProvider(Protocol):
    """Anything that can report who is logged in."""

    def get_current_user(self) -> Optional[User]:
        ...


class NoActor:
    """Actor source used before wiring completes; nobody is ever logged in."""

    def get_current_user(self) -> Optional[User]:
        return None


class AuditService:
    """
    Synchronous audit logger.

    Every ``log_action`` performs exactly one append to the audit trail.
    Storage failures propagate as ``RepositoryError``.
    """

    def __init__(self, audit_repository: AuditRepository):
        self._repository = audit_repository
        self._actor_provider: ActorProvider = NoActor()
        self._actor_bound = False

    def bind_actor_provider(self, provider: ActorProvider) -> None:
        """
        Supply the actor source. Must be called exactly once.

        Raises:
            WiringError: If a provider is already bound
        """
        if self._actor_bound:
            raise WiringError("Audit service already has an actor provider")

        self._actor_provider = provider
        self._actor_bound = True
        logger.info(f"Audit service bound to actor provider {provider.__class__.__name__}")

    @property
    def actor_bound(self) -> bool:
        return self._actor_bound

    def current_actor_name(self) -> str:
        user = self._actor_provider.get_current_user()
        return user.username if user is not None else SYSTEM_ACTOR

    def log_action(self, description: str) -> AuditEntry:
        """
        Append an entry for ``description``.

        The actor is read now, at call time.

        Returns:
            The entry that was written
        """
        entry = AuditEntry(actor=self.current_actor_name(), action=description)
        self._repository.append(entry.render())
        logger.debug(f"Audit: {entry}")
        return entry

    def get_history(self) -> List[str]:
        """Raw entries in insertion order, as an independent copy."""
        return list(self._repository.find_all())
