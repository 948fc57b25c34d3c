"""
API Routers
"""

from .audit import router as audit_router
from .auth import router as auth_router
from .health import router as health_router
from .products import router as products_router

__all__ = [
    "audit_router",
    "auth_router",
    "health_router",
    "products_router",
]
