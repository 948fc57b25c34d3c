"""
Database ORM Models
SQLAlchemy ORM models and session helpers.
"""

from .models import AuditLog, Base, Product, User
from .session import create_db_engine, create_session_factory

__all__ = [
    "AuditLog",
    "Base",
    "Product",
    "User",
    "create_db_engine",
    "create_session_factory",
]
