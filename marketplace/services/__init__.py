"""
Services
Audit, authentication and catalog orchestration.
"""

from .audit_service import SYSTEM_ACTOR, ActorProvider, AuditService, NoActor
from .auth_service import AuthService
from .catalog_service import CatalogService
from .search_cache import SearchCache

__all__ = [
    "SYSTEM_ACTOR",
    "ActorProvider",
    "AuditService",
    "NoActor",
    "AuthService",
    "CatalogService",
    "SearchCache",
]
