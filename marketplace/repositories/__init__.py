"""
Repositories
Catalog, identity and audit stores (in-memory and SQLAlchemy).
"""

from .base import AuditRepository, ProductRepository, UserRepository
from .filters import FilterOperator, ProductFilter, build_filters, matches_all
from .memory import InMemoryAuditRepository, InMemoryProductRepository, InMemoryUserRepository
from .sql import SqlAuditRepository, SqlProductRepository, SqlUserRepository

__all__ = [
    "AuditRepository",
    "ProductRepository",
    "UserRepository",
    "FilterOperator",
    "ProductFilter",
    "build_filters",
    "matches_all",
    "InMemoryAuditRepository",
    "InMemoryProductRepository",
    "InMemoryUserRepository",
    "SqlAuditRepository",
    "SqlProductRepository",
    "SqlUserRepository",
]
