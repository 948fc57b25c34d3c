"""
Error Handlers
Map domain exceptions onto HTTP responses.
"""

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..exceptions import (
    CatalogValidationError,
    ForbiddenError,
    MarketplaceError,
    NotFoundError,
    RepositoryError,
    UnauthenticatedError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: Dict[Type[MarketplaceError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    CatalogValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    RepositoryError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: MarketplaceError) -> int:
    """Most specific mapped status for the exception, 500 otherwise."""
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str, error_type: str, details=None) -> dict:
    error = {"message": message, "type": error_type}
    if details is not None:
        error["details"] = details
    return {"error": error}


def setup_error_handlers(app: FastAPI) -> None:
    """
    Set up custom error handlers for the FastAPI app.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(MarketplaceError)
    async def marketplace_error_handler(request: Request, exc: MarketplaceError):
        """Handle domain errors raised by services and stores."""
        status_code = status_code_for(exc)

        if isinstance(exc, RepositoryError):
            # Store internals stay in the log
            logger.error(
                f"Storage failure: {exc.message}",
                exc_info=exc,
                extra={"path": request.url.path, "details": exc.details},
            )
            return JSONResponse(
                status_code=status_code,
                content=error_body("storage failure", "RepositoryError"),
            )

        log = logger.error if status_code >= 500 else logger.warning
        log(
            f"API error: {exc.message}",
            extra={
                "status_code": status_code,
                "details": exc.details,
                "path": request.url.path,
            },
        )

        return JSONResponse(
            status_code=status_code,
            content=error_body(exc.message, exc.__class__.__name__, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        logger.warning(f"Validation error: {exc}", extra={"path": request.url.path})

        # Convert error details to JSON-serializable format
        errors = []
        for error in exc.errors():
            errors.append(
                {
                    "loc": list(error.get("loc", [])),
                    "msg": str(error.get("msg", "")),
                    "type": error.get("type", ""),
                }
            )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_body("Request validation failed", "ValidationError", errors),
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle value errors."""
        logger.warning(f"Value error: {exc}", extra={"path": request.url.path})

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(str(exc), "ValueError"),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unexpected error: {exc}", exc_info=True, extra={"path": request.url.path})

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("An unexpected error occurred", "InternalServerError"),
        )
