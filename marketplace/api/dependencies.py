"""
Dependency Injection
FastAPI dependencies resolving services from the application container.
"""

from decimal import Decimal
from typing import Optional

from fastapi import Depends, Header, Query, Request

from ..container import Container
from ..models import SearchCriteria, User
from ..services import AuditService, AuthService, CatalogService


def get_container(request: Request) -> Container:
    """The container built by ``create_app``."""
    return request.app.state.container


def get_catalog_service(container: Container = Depends(get_container)) -> CatalogService:
    return container.catalog_service


def get_auth_service(container: Container = Depends(get_container)) -> AuthService:
    return container.auth_service


def get_audit_service(container: Container = Depends(get_container)) -> AuditService:
    return container.audit_service


def get_current_user(auth: AuthService = Depends(get_auth_service)) -> User:
    """
    Require a logged-in actor.

    Use as FastAPI dependency:
        @router.get("/me")
        def me(user: User = Depends(get_current_user)):
            ...
    """
    return auth.require_authenticated()


def require_admin(auth: AuthService = Depends(get_auth_service)) -> User:
    """Require a logged-in administrator (401 when anonymous, 403 otherwise)."""
    return auth.require_admin()


def get_search_criteria(
    category: Optional[str] = Query(None, max_length=255, description="Category (case-insensitive)"),
    brand: Optional[str] = Query(None, max_length=255, description="Brand (case-insensitive)"),
    min_price: Optional[Decimal] = Query(None, ge=0, description="Minimum price, inclusive"),
    max_price: Optional[Decimal] = Query(None, ge=0, description="Maximum price, inclusive"),
) -> SearchCriteria:
    return SearchCriteria(
        category=category,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
    )


def get_request_id(x_request_id: Optional[str] = Header(None)) -> str:
    return x_request_id or "-"
