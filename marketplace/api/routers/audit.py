"""
Audit trail routes (administrators only).
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...models import User
from ...services import AuditService
from ..dependencies import get_audit_service, require_admin
from ..schemas import AuditHistoryResponse

router = APIRouter(prefix="/api/v1", tags=["audit"])


@router.get("/audit", response_model=AuditHistoryResponse)
def get_audit_history(
    limit: Optional[int] = Query(None, ge=1, description="Return only the most recent entries"),
    admin: User = Depends(require_admin),
    audit: AuditService = Depends(get_audit_service),
) -> AuditHistoryResponse:
    """Audit entries in insertion order (oldest first)."""
    entries = audit.get_history()
    if limit is not None:
        entries = entries[-limit:]
    return AuditHistoryResponse(entries=entries, total=len(entries))
