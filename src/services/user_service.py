"""User service for profile reads and updates."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.database import is_unique_violation
from src.models.user import User
from src.schemas.user import UserResponse, UserUpdate
from src.services.auth import Identity
from src.services.exceptions import DuplicateEmailError, UnauthenticatedError

logger = logging.getLogger(__name__)


class UserService:
    """Service for the authenticated user's own record.

    Methods return ``UserResponse`` rather than the ORM object so the
    password hash never leaves this layer.
    """

    def __init__(self, db: Session):
        self.db = db

    def _get_user(self, identity: Identity) -> User:
        user = self.db.query(User).filter(User.id == identity.user_id).first()
        if user is None:
            # Token outlived its account
            raise UnauthenticatedError("User not found")
        return user

    def get_profile(self, identity: Identity) -> UserResponse:
        """Get the caller's profile."""
        return UserResponse.model_validate(self._get_user(identity))

    def update_profile(self, identity: Identity, data: UserUpdate) -> UserResponse:
        """Update the caller's email and/or name."""
        user = self._get_user(identity)

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(user, field, value)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise DuplicateEmailError() from e
            raise
        self.db.refresh(user)

        logger.info(f"Updated profile for user {user.id}")
        return UserResponse.model_validate(user)
