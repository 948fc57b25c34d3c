"""
Audit entry model.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

AUDIT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class AuditEntry(BaseModel):
    """One audit trail line: who did what, and when."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=datetime.now)
    actor: str
    action: str

    def render(self) -> str:
        """Format as the stored trail line."""
        return (
            f"[{self.timestamp.strftime(AUDIT_TIMESTAMP_FORMAT)}] "
            f"Actor: [{self.actor}] - Action: [{self.action}]"
        )

    def __str__(self) -> str:
        return self.render()
