"""
Tests for the SQLAlchemy stores against in-memory SQLite.
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from marketplace.exceptions import NotFoundError, RepositoryError
from marketplace.models import Role, SearchCriteria, User
from marketplace.repositories import (
    SqlAuditRepository,
    SqlProductRepository,
    SqlUserRepository,
)


class TestSqlProductRepository:
    @pytest.fixture(autouse=True)
    def setup(self, session_factory):
        self.repo = SqlProductRepository(session_factory)

    def test_save_assigns_id(self, make_product):
        saved = self.repo.save(make_product(name="Book", price="10.50"))

        assert saved.id is not None
        loaded = self.repo.find_by_id(saved.id)
        assert loaded.name == "Book"
        assert loaded.price == Decimal("10.50")

    def test_save_existing_overwrites(self, make_product):
        saved = self.repo.save(make_product(name="Book", stock=1))
        saved.stock = 9
        self.repo.save(saved)

        assert self.repo.find_by_id(saved.id).stock == 9
        assert len(self.repo.find_all()) == 1

    def test_find_all_ordered(self, make_product):
        for name in ["Pen", "Book", "Atlas"]:
            self.repo.save(make_product(name=name))

        assert [p.name for p in self.repo.find_all()] == ["Atlas", "Book", "Pen"]

    def test_delete(self, make_product):
        saved = self.repo.save(make_product())

        self.repo.delete_by_id(saved.id)
        self.repo.delete_by_id(saved.id)

        assert self.repo.find_by_id(saved.id) is None

    def test_search(self, make_product):
        self.repo.save(make_product(name="Book", category="Books", brand="Acme", price="10"))
        self.repo.save(make_product(name="Atlas", category="BOOKS", brand="Globe", price="40"))
        self.repo.save(make_product(name="Pen", category="Office", brand="Acme", price="1"))

        books = self.repo.search(SearchCriteria(category="books"))
        assert [p.name for p in books] == ["Atlas", "Book"]

        cheap = self.repo.search(SearchCriteria(brand="ACME", max_price=Decimal("10")))
        assert [p.name for p in cheap] == ["Book", "Pen"]

        ranged = self.repo.search(SearchCriteria(min_price=Decimal("10"), max_price=Decimal("40")))
        assert [p.name for p in ranged] == ["Atlas", "Book"]

    def test_search_missing_brand_never_matches(self, make_product):
        self.repo.save(make_product(name="Book", brand=None))

        assert self.repo.search(SearchCriteria(brand="Acme")) == []

    def test_round_trip_preserves_every_field(self, make_product):
        saved = self.repo.save(make_product(name="Bolt", brand="Acme", price="19.99", stock=7))

        assert self.repo.find_by_id(saved.id) == saved
        assert self.repo.find_all() == [saved]

    def test_search_folds_non_ascii_case(self, make_product):
        self.repo.save(make_product(name="Война и мир", category="Книги", brand="Эксмо"))
        self.repo.save(make_product(name="Pen", category="Office"))

        results = self.repo.search(SearchCriteria(category="книги", brand="ЭКСМО"))

        assert [p.name for p in results] == ["Война и мир"]

    def test_save_with_unknown_id_rejected(self, make_product):
        unknown = make_product(name="Imported")
        unknown.id = 10

        with pytest.raises(NotFoundError):
            self.repo.save(unknown)

        assert self.repo.find_all() == []
        assert self.repo.save(make_product(name="New")).id == 1

    def test_save_after_delete_does_not_resurrect(self, make_product):
        saved = self.repo.save(make_product(name="Book"))
        self.repo.delete_by_id(saved.id)

        with pytest.raises(NotFoundError):
            self.repo.save(saved)

        assert self.repo.find_by_id(saved.id) is None


class TestSqlUserRepository:
    def test_save_and_find(self, session_factory):
        repo = SqlUserRepository(session_factory)
        saved = repo.save(User(username="admin", password="pw", role=Role.ADMIN))

        found = repo.find_by_username("admin")
        assert found == saved
        assert found.password == "pw"
        assert repo.find_by_username("nobody") is None

    def test_duplicate_username_raises_repository_error(self, session_factory):
        repo = SqlUserRepository(session_factory)
        repo.save(User(username="admin", password="pw"))

        with pytest.raises(RepositoryError) as exc_info:
            repo.save(User(username="admin", password="other"))

        assert exc_info.value.cause is not None

    def test_save_with_unknown_id_rejected(self, session_factory):
        repo = SqlUserRepository(session_factory)

        with pytest.raises(NotFoundError):
            repo.save(User(id=5, username="ghost", password="pw"))

        assert repo.find_by_username("ghost") is None


class TestSqlAuditRepository:
    def test_append_preserves_order(self, session_factory):
        repo = SqlAuditRepository(session_factory)
        for line in ["first", "second", "third"]:
            repo.append(line)

        assert repo.find_all() == ["first", "second", "third"]

    def test_storage_failure_wrapped(self, session_factory):
        repo = SqlAuditRepository(session_factory)

        with session_factory() as session:
            session.connection().exec_driver_sql("DROP TABLE audit_log")
            session.commit()

        with pytest.raises(RepositoryError) as exc_info:
            repo.append("lost")

        assert isinstance(exc_info.value.__cause__, OperationalError)
