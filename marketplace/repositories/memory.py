"""
In-Memory Repositories
Process-local stores for development and tests. Data is lost on restart.

Each store has its own lock, so audit appends never serialize catalog writes.
Stored records are private copies: mutating a returned object does not touch
the store until it is saved.
"""

import logging
import threading
from typing import Dict, List, Optional

from ..exceptions import NotFoundError, RepositoryError
from ..models import Product, SearchCriteria, User
from .filters import build_filters, matches_all

logger = logging.getLogger(__name__)


def _sort_key(product: Product):
    return (product.name, product.id)


class InMemoryProductRepository:
    """In-memory catalog store."""

    def __init__(self) -> None:
        self._storage: Dict[int, Product] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def save(self, product: Product) -> Product:
        with self._lock:
            if product.id is None:
                self._last_id += 1
                product.id = self._last_id
            elif product.id not in self._storage:
                raise NotFoundError("Product", product.id)
            self._storage[product.id] = product.model_copy()
        return product

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._lock:
            stored = self._storage.get(product_id)
            return stored.model_copy() if stored is not None else None

    def find_all(self) -> List[Product]:
        with self._lock:
            products = [p.model_copy() for p in self._storage.values()]
        return sorted(products, key=_sort_key)

    def delete_by_id(self, product_id: int) -> None:
        with self._lock:
            self._storage.pop(product_id, None)

    def search(self, criteria: SearchCriteria) -> List[Product]:
        filters = build_filters(criteria)
        with self._lock:
            products = [
                p.model_copy() for p in self._storage.values() if matches_all(filters, p)
            ]
        return sorted(products, key=_sort_key)


class InMemoryUserRepository:
    """In-memory identity store keyed by username."""

    def __init__(self) -> None:
        self._storage: Dict[str, User] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def find_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            stored = self._storage.get(username)
            return stored.model_copy() if stored is not None else None

    def save(self, user: User) -> User:
        with self._lock:
            existing = self._storage.get(user.username)
            if existing is not None and existing.id != user.id:
                raise RepositoryError(f"Username already exists: {user.username}")

            if user.id is None:
                self._last_id += 1
                user.id = self._last_id
            else:
                previous_name = self._username_for(user.id)
                if previous_name is None:
                    raise NotFoundError("User", user.id)
                if previous_name != user.username:
                    del self._storage[previous_name]
            self._storage[user.username] = user.model_copy()
        return user

    def _username_for(self, user_id: int) -> Optional[str]:
        for name, stored in self._storage.items():
            if stored.id == user_id:
                return name
        return None


class InMemoryAuditRepository:
    """In-memory append-only audit trail."""

    def __init__(self) -> None:
        self._entries: List[str] = []
        self._lock = threading.Lock()

    def append(self, entry: str) -> None:
        with self._lock:
            self._entries.append(entry)

    def find_all(self) -> List[str]:
        with self._lock:
            return list(self._entries)
