"""Unit tests for application wiring."""

from marketplace.config import Settings
from marketplace.container import build_container, seed_admin
from marketplace.models import Role, User
from marketplace.repositories import InMemoryProductRepository, InMemoryUserRepository


class TestBuildContainer:
    def test_memory_backend(self, settings):
        container = build_container(settings)

        assert isinstance(container.repositories.products, InMemoryProductRepository)
        assert container.engine is None
        assert container.audit_service.actor_bound

    def test_audit_follows_login(self, settings):
        container = build_container(settings)

        container.audit_service.log_action("BEFORE")
        container.auth_service.login("admin", "correct")
        container.audit_service.log_action("AFTER")

        history = container.audit_service.get_history()
        assert "Actor: [SYSTEM] - Action: [BEFORE]" in history[0]
        assert "Actor: [admin] - Action: [AFTER]" in history[-1]

    def test_admin_seeded(self, settings):
        container = build_container(settings)

        admin = container.repositories.users.find_by_username("admin")
        assert admin is not None
        assert admin.role == Role.ADMIN

    def test_seeding_disabled(self):
        container = build_container(Settings(storage_backend="memory", seed_admin=False))

        assert container.repositories.users.find_by_username("admin") is None

    def test_sql_backend(self):
        container = build_container(
            Settings(storage_backend="sql", database_url="sqlite://", admin_password="pw")
        )
        try:
            assert container.engine is not None
            assert container.auth_service.login("admin", "pw") is not None
        finally:
            container.close()


class TestSeedAdmin:
    def test_existing_user_kept(self):
        users = InMemoryUserRepository()
        existing = users.save(User(username="admin", password="original", role=Role.USER))

        seeded = seed_admin(users, "admin", "other")

        assert seeded.id == existing.id
        assert users.find_by_username("admin").password == "original"
