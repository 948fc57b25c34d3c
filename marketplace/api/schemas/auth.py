"""
Authentication request/response schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...models import Role


class LoginRequest(BaseModel):
    """Request schema for user login."""

    username: str = Field(..., min_length=1, max_length=255, description="Account name")
    password: str = Field(..., min_length=1, description="User password")


class UserResponse(BaseModel):
    """Response schema for the current user. The password is never returned."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="User ID")
    username: str = Field(..., description="Account name")
    role: Role = Field(..., description="ADMIN or USER")


class MessageResponse(BaseModel):
    """Generic acknowledgement."""

    message: str
