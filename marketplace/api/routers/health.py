"""
Health Check Endpoints
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status

from ...container import Container
from ...exceptions import RepositoryError
from ..dependencies import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check(
    request: Request,
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """
    Health and status check.

    Checks status of:
    - Catalog store (product count)
    - Search cache (size and hit statistics)
    - Request latency

    Returns:
        Status information; ``degraded`` when the store cannot be read
    """
    settings = container.settings
    status_info: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.version,
        "storage": settings.storage_backend,
        "components": {},
    }

    try:
        product_count = len(container.catalog_service.get_all())
        status_info["components"]["catalog"] = {"status": "healthy", "products": product_count}
    except RepositoryError as e:
        logger.error(f"Catalog health check failed: {e}")
        status_info["components"]["catalog"] = {"status": "unhealthy", "error": e.message}
        status_info["status"] = "degraded"

    status_info["components"]["cache"] = container.catalog_service.cache.get_statistics()

    status_info["performance"] = request.app.state.latency_tracker.summary()

    return status_info
