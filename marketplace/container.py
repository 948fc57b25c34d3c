"""
Dependency Container
Composition root: builds stores and services and wires them in order.

The audit service and the auth service depend on each other (auth logs
through audit, audit attributes entries to auth's current actor). They are
wired in three steps:

1. ``AuditService`` is built on the audit trail alone; it logs as ``SYSTEM``.
2. ``AuthService`` is built with the identity store and the audit service.
3. ``audit_service.bind_actor_provider(auth_service)`` closes the cycle.

Everything else is plain constructor injection.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from sqlalchemy.engine import Engine

from .config import Settings, get_settings
from .db import create_db_engine, create_session_factory
from .models import Role, User
from .repositories import (
    AuditRepository,
    InMemoryAuditRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
    ProductRepository,
    SqlAuditRepository,
    SqlProductRepository,
    SqlUserRepository,
    UserRepository,
)
from .services import AuditService, AuthService, CatalogService, SearchCache
from .services import instrumentation

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    products: ProductRepository
    users: UserRepository
    audit: AuditRepository


@dataclass
class Container:
    """Fully wired application components."""

    settings: Settings
    repositories: Repositories
    audit_service: AuditService
    auth_service: AuthService
    catalog_service: CatalogService
    engine: Optional[Engine] = None

    def close(self) -> None:
        """Release database connections, if any."""
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database engine disposed")


def build_repositories(settings: Settings) -> Tuple[Repositories, Optional[Engine]]:
    """Create the three stores for the configured backend."""
    if settings.storage_backend == "sql":
        engine = create_db_engine(settings.database_url, echo=settings.db_echo)
        session_factory = create_session_factory(engine)
        repositories = Repositories(
            products=SqlProductRepository(session_factory),
            users=SqlUserRepository(session_factory),
            audit=SqlAuditRepository(session_factory),
        )
        return repositories, engine

    repositories = Repositories(
        products=InMemoryProductRepository(),
        users=InMemoryUserRepository(),
        audit=InMemoryAuditRepository(),
    )
    return repositories, None


def wire_services(repositories: Repositories) -> Tuple[AuditService, AuthService, CatalogService]:
    """Construct the services in dependency order, resolving the audit/auth cycle."""
    # Phase 1: audit without an actor source
    audit_service = AuditService(repositories.audit)

    # Phase 2: auth holding a live reference to audit
    auth_service = AuthService(repositories.users, audit_service)

    # Phase 3: hand the actor source back to audit
    audit_service.bind_actor_provider(auth_service)

    catalog_service = CatalogService(repositories.products, audit_service, SearchCache())
    return audit_service, auth_service, catalog_service


def seed_admin(users: UserRepository, username: str, password: str) -> User:
    """Create the administrator account unless a user with that name exists."""
    existing = users.find_by_username(username)
    if existing is not None:
        logger.info(f"Admin seed: user '{username}' already exists")
        return existing

    admin = users.save(User(username=username, password=password, role=Role.ADMIN))
    logger.info(f"Admin seed: created administrator '{username}'")
    return admin


def build_container(settings: Optional[Settings] = None) -> Container:
    """
    Build the application.

    Args:
        settings: Settings to use (default: global settings)

    Returns:
        Wired container, with the admin account seeded when configured
    """
    settings = settings or get_settings()
    instrumentation.configure(settings.slow_operation_ms)

    repositories, engine = build_repositories(settings)
    audit_service, auth_service, catalog_service = wire_services(repositories)

    if settings.seed_admin:
        seed_admin(repositories.users, settings.admin_username, settings.admin_password)

    logger.info(f"Container built (storage={settings.storage_backend})")

    return Container(
        settings=settings,
        repositories=repositories,
        audit_service=audit_service,
        auth_service=auth_service,
        catalog_service=catalog_service,
        engine=engine,
    )
