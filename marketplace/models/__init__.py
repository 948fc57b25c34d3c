"""
Domain Models Package
Pydantic models shared by stores, services and the API.
"""

from .audit import AuditEntry
from .product import Product
from .search import SearchCriteria
from .user import Role, User

__all__ = [
    "AuditEntry",
    "Product",
    "Role",
    "SearchCriteria",
    "User",
]
