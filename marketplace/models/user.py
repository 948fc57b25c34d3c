"""
User domain model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """User roles."""

    ADMIN = "ADMIN"
    USER = "USER"


class User(BaseModel):
    """
    Catalog user.

    The credential is compared verbatim at login. It is left out of equality,
    hashing, repr and serialized output.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[int] = Field(default=None, gt=0)
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., repr=False, exclude=True)
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return (self.id, self.username, self.role) == (other.id, other.username, other.role)

    def __hash__(self) -> int:
        return hash((self.id, self.username, self.role))
