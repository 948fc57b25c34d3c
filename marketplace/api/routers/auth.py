"""
Authentication routes.
Login, logout and the current actor.

The actor slot is process-wide: one user is logged in at a time for the
whole service, and every audit entry is attributed to that user.
"""

import logging

from fastapi import APIRouter, Depends, status

from ...exceptions import UnauthenticatedError
from ...models import User
from ...services import AuthService
from ..dependencies import get_auth_service, get_current_user
from ..schemas import LoginRequest, MessageResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])


@router.post("/login", response_model=UserResponse, status_code=status.HTTP_200_OK)
def login(
    request: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Log in and become the current actor.

    A successful login replaces whoever was logged in before. Bad credentials
    return 401 and leave the current actor unchanged.
    """
    user = auth.login(request.username, request.password)
    if user is None:
        raise UnauthenticatedError("Incorrect username or password")

    return UserResponse.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
def logout(auth: AuthService = Depends(get_auth_service)) -> MessageResponse:
    """Clear the current actor. Succeeds even when nobody is logged in."""
    auth.logout()
    return MessageResponse(message="Successfully logged out")


@router.get("/me", response_model=UserResponse)
def get_me(user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user)
