"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.auth import AuthService, Identity
from src.services.bookmark_service import BookmarkService
from src.services.exceptions import UnauthenticatedError
from src.services.user_service import UserService

# auto_error=False so a missing header surfaces as our own 401
security = HTTPBearer(auto_error=False)


def get_current_identity(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity:
    """Get the authenticated caller from the bearer token."""
    if credentials is None:
        raise UnauthenticatedError("Not authenticated")
    return request.app.state.token_service.verify(credentials.credentials)


def get_auth_service(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, request.app.state.password_hasher, request.app.state.token_service)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_bookmark_service(
    db: Annotated[Session, Depends(get_db)],
) -> BookmarkService:
    """Get bookmark service with dependencies."""
    return BookmarkService(db)


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
