"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service
from src.schemas.auth import Token, UserCredentials
from src.services.auth import AuthService


def signup(
    credentials: UserCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    access_token = auth_service.signup(credentials.email, credentials.password)
    return Token(access_token=access_token)


def signin(
    credentials: UserCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Sign in with email and password."""
    access_token = auth_service.signin(credentials.email, credentials.password)
    return Token(access_token=access_token)


router = APIRouter(prefix="/auth", tags=["auth"])
router.add_api_route(
    "/signup",
    signup,
    methods=["POST"],
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
)
router.add_api_route("/signin", signin, methods=["POST"], response_model=Token)
