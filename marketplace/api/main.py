"""
FastAPI Main Application
Entry point for the Marketplace Catalog API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, get_settings
from ..container import Container, build_container
from .errors import setup_error_handlers
from .middleware import LatencyTracker, RequestLoggingMiddleware, RequestTimingMiddleware
from .routers import audit_router, auth_router, health_router, products_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The container is built before the app starts serving; shutdown releases
    its database connections.
    """
    container: Container = app.state.container
    logger.info(
        f"Starting {container.settings.app_name} "
        f"(storage={container.settings.storage_backend})"
    )

    yield

    logger.info(f"Shutting down {container.settings.app_name}...")
    container.close()


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use (default: the container's, else global settings)
        container: Pre-built container (default: built from settings)

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = container.settings if container is not None else get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if container is None:
        container = build_container(settings)

    app = FastAPI(
        title=settings.app_name,
        description=settings.description,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.latency_tracker = LatencyTracker()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        RequestTimingMiddleware,
        tracker=app.state.latency_tracker,
        slow_request_ms=settings.slow_operation_ms,
    )
    app.add_middleware(RequestLoggingMiddleware)

    setup_error_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(products_router)
    app.include_router(audit_router)

    @app.get("/")
    def root():
        """API information."""
        return {
            "name": settings.app_name,
            "version": settings.version,
            "description": settings.description,
            "endpoints": {
                "health": "/health",
                "products": "/api/v1/products",
                "auth": "/api/v1/auth",
                "audit": "/api/v1/audit",
                "docs": "/docs",
            },
        }

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "marketplace.api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
