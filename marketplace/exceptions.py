"""
Domain Exceptions
Error kinds raised by stores and services, independent of any transport.
"""

from typing import Any, Dict, Optional, Union


class MarketplaceError(Exception):
    """Base exception for catalog backend errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(MarketplaceError):
    """Exception raised when a lookup by identity yields nothing."""

    def __init__(self, resource: str, resource_id: Union[int, str]):
        super().__init__(
            message=f"{resource} not found: {resource_id}",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


class CatalogValidationError(MarketplaceError):
    """Exception raised for malformed or out-of-range input before it reaches a store."""


class RepositoryError(MarketplaceError):
    """
    Exception raised for durable-storage faults.

    The underlying exception is kept on ``cause`` and chained as ``__cause__``
    by the raising store.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        details = {"cause": repr(cause)} if cause is not None else {}
        super().__init__(message=message, details=details)
        self.cause = cause


class UnauthenticatedError(MarketplaceError):
    """Exception raised when an operation needs an actor and none is logged in."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message=message)


class ForbiddenError(MarketplaceError):
    """Exception raised when the current actor lacks the required role."""

    def __init__(self, message: str = "Administrator privileges required"):
        super().__init__(message=message)


class WiringError(MarketplaceError):
    """Exception raised when components are wired out of order or twice."""
