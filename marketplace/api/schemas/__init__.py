"""
Request/response schemas.
"""

from .audit import AuditHistoryResponse
from .auth import LoginRequest, MessageResponse, UserResponse
from .product import ProductListResponse, ProductPayload, ProductResponse

__all__ = [
    "AuditHistoryResponse",
    "LoginRequest",
    "MessageResponse",
    "UserResponse",
    "ProductListResponse",
    "ProductPayload",
    "ProductResponse",
]
