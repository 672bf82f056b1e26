"""User profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import CurrentIdentity, get_user_service
from src.schemas.user import UserResponse, UserUpdate
from src.services.user_service import UserService


def get_profile(
    identity: CurrentIdentity,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    return user_service.get_profile(identity)


def update_user(
    user_data: UserUpdate,
    identity: CurrentIdentity,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update current user information."""
    return user_service.update_profile(identity, user_data)


router = APIRouter(prefix="/users", tags=["users"])
router.add_api_route("/profile", get_profile, methods=["GET"], response_model=UserResponse)
router.add_api_route("", update_user, methods=["PUT"], response_model=UserResponse)
