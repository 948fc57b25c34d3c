"""
SQL Repositories
SQLAlchemy-backed stores. Each call runs in its own transaction, so a failed
write is rolled back and never partially applied.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..db import models as orm
from ..exceptions import NotFoundError, RepositoryError
from ..models import Product, Role, SearchCriteria, User
from .filters import build_filters, to_where_clauses

logger = logging.getLogger(__name__)


def _to_product(row: orm.Product) -> Product:
    return Product(
        id=row.id,
        name=row.name,
        category=row.category,
        brand=row.brand,
        price=Decimal(str(row.price)),
        stock=row.stock,
    )


def _to_user(row: orm.User) -> User:
    return User(id=row.id, username=row.username, password=row.password, role=Role(row.role))


class SqlProductRepository:
    """Catalog store over the ``products`` table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def save(self, product: Product) -> Product:
        try:
            with self._session_factory.begin() as session:
                if product.id is None:
                    row = orm.Product()
                    session.add(row)
                else:
                    row = session.get(orm.Product, product.id)
                    if row is None:
                        raise NotFoundError("Product", product.id)

                row.name = product.name
                row.category = product.category
                row.brand = product.brand
                row.price = product.price
                row.stock = product.stock
                session.flush()
                new_id = row.id
        except SQLAlchemyError as e:
            logger.error(f"Failed to save product {product.id}: {e}")
            raise RepositoryError("Failed to save product", cause=e) from e

        if product.id is None:
            product.id = new_id
        return product

    def find_by_id(self, product_id: int) -> Optional[Product]:
        try:
            with self._session_factory() as session:
                row = session.get(orm.Product, product_id)
                return _to_product(row) if row is not None else None
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to load product {product_id}", cause=e) from e

    def find_all(self) -> List[Product]:
        stmt = select(orm.Product).order_by(orm.Product.name, orm.Product.id)
        try:
            with self._session_factory() as session:
                return [_to_product(row) for row in session.scalars(stmt)]
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to list products", cause=e) from e

    def delete_by_id(self, product_id: int) -> None:
        try:
            with self._session_factory.begin() as session:
                row = session.get(orm.Product, product_id)
                if row is not None:
                    session.delete(row)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete product {product_id}: {e}")
            raise RepositoryError(f"Failed to delete product {product_id}", cause=e) from e

    def search(self, criteria: SearchCriteria) -> List[Product]:
        clauses = to_where_clauses(build_filters(criteria), orm.Product)
        stmt = select(orm.Product).where(*clauses).order_by(orm.Product.name, orm.Product.id)
        try:
            with self._session_factory() as session:
                return [_to_product(row) for row in session.scalars(stmt)]
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to search products", cause=e) from e


class SqlUserRepository:
    """Identity store over the ``users`` table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> Optional[User]:
        stmt = select(orm.User).where(orm.User.username == username)
        try:
            with self._session_factory() as session:
                row = session.scalars(stmt).first()
                return _to_user(row) if row is not None else None
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to load user {username}", cause=e) from e

    def save(self, user: User) -> User:
        try:
            with self._session_factory.begin() as session:
                if user.id is None:
                    row = orm.User()
                    session.add(row)
                else:
                    row = session.get(orm.User, user.id)
                    if row is None:
                        raise NotFoundError("User", user.id)

                row.username = user.username
                row.password = user.password
                row.role = user.role.value
                session.flush()
                new_id = row.id
        except SQLAlchemyError as e:
            logger.error(f"Failed to save user {user.username}: {e}")
            raise RepositoryError(f"Failed to save user {user.username}", cause=e) from e

        if user.id is None:
            user.id = new_id
        return user


class SqlAuditRepository:
    """Append-only audit trail over the ``audit_log`` table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def append(self, entry: str) -> None:
        try:
            with self._session_factory.begin() as session:
                session.add(orm.AuditLog(event_log=entry))
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to append audit entry", cause=e) from e

    def find_all(self) -> List[str]:
        stmt = select(orm.AuditLog.event_log).order_by(orm.AuditLog.id)
        try:
            with self._session_factory() as session:
                return list(session.scalars(stmt))
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to read audit log", cause=e) from e
