"""
Repository Interfaces
Storage contracts consumed by the services.

Implementations live in ``memory`` (process-local) and ``sql`` (SQLAlchemy).
Every implementation reports storage faults as ``RepositoryError``.
"""

from typing import List, Optional, Protocol

from ..models import Product, SearchCriteria, User


class ProductRepository(Protocol):
    """Catalog store."""

    def save(self, product: Product) -> Product:
        """
        Insert ``product`` when it has no id yet, otherwise overwrite the
        stored record with that id.

        A newly assigned id is set on the passed object, which is returned.
        Ids are only ever assigned by the store.

        Raises:
            NotFoundError: If the product has an id that no stored record has
        """
        ...

    def find_by_id(self, product_id: int) -> Optional[Product]:
        ...

    def find_all(self) -> List[Product]:
        """All products ordered by name, then id."""
        ...

    def delete_by_id(self, product_id: int) -> None:
        ...

    def search(self, criteria: SearchCriteria) -> List[Product]:
        """Products matching every present criteria field, ordered by name, then id."""
        ...


class UserRepository(Protocol):
    """Identity store."""

    def find_by_username(self, username: str) -> Optional[User]:
        ...

    def save(self, user: User) -> User:
        """Insert when ``user.id`` is None, otherwise overwrite; unknown ids raise ``NotFoundError``."""
        ...


class AuditRepository(Protocol):
    """Append-only audit trail."""

    def append(self, entry: str) -> None:
        ...

    def find_all(self) -> List[str]:
        """Every entry in insertion order."""
        ...
