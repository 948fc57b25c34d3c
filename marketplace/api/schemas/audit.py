"""
Audit trail response schema.
"""

from typing import List

from pydantic import BaseModel, Field


class AuditHistoryResponse(BaseModel):
    """Formatted audit entries, oldest first."""

    entries: List[str] = Field(..., description="Entries in insertion order")
    total: int = Field(..., description="Number of entries returned")
