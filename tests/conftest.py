"""
Pytest configuration and shared fixtures
"""

from decimal import Decimal

import pytest

from marketplace.config import Settings, reset_settings
from marketplace.container import Repositories, seed_admin, wire_services
from marketplace.models import Product, Role, User
from marketplace.repositories import (
    InMemoryAuditRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct"


@pytest.fixture(autouse=True)
def clean_settings():
    """Every test starts from freshly loaded settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    return Settings(
        storage_backend="memory",
        seed_admin=True,
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        log_level="DEBUG",
    )


@pytest.fixture
def repositories():
    return Repositories(
        products=InMemoryProductRepository(),
        users=InMemoryUserRepository(),
        audit=InMemoryAuditRepository(),
    )


@pytest.fixture
def services(repositories):
    """Audit, auth and catalog services wired in order, with two accounts."""
    seed_admin(repositories.users, ADMIN_USERNAME, ADMIN_PASSWORD)
    repositories.users.save(User(username="alice", password="secret", role=Role.USER))
    return wire_services(repositories)


@pytest.fixture
def audit_service(services):
    return services[0]


@pytest.fixture
def auth_service(services):
    return services[1]


@pytest.fixture
def catalog_service(services):
    return services[2]


@pytest.fixture
def make_product():
    """Factory for unsaved products."""

    def _make(name="Book", category="Books", brand=None, price="10", stock=5):
        return Product(
            name=name,
            category=category,
            brand=brand,
            price=Decimal(price),
            stock=stock,
        )

    return _make
