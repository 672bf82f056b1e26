"""Bookmark service for owner-scoped CRUD."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.database import is_foreign_key_violation
from src.models.bookmark import Bookmark
from src.schemas.bookmark import BookmarkCreate, BookmarkUpdate
from src.services.auth import Identity
from src.services.exceptions import BookmarkNotFoundError, ForbiddenError, UnauthenticatedError

logger = logging.getLogger(__name__)


class BookmarkService:
    """Service for bookmark operations, always scoped to the calling user."""

    def __init__(self, db: Session):
        self.db = db

    def list_bookmarks(self, identity: Identity) -> list[Bookmark]:
        """Get all bookmarks owned by the caller, oldest first."""
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.owner_id == identity.user_id)
            .order_by(Bookmark.id)
            .all()
        )

    def get_bookmark(self, identity: Identity, bookmark_id: int) -> Bookmark | None:
        """Get a bookmark by id if the caller owns it."""
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.owner_id == identity.user_id)
            .first()
        )

    def create_bookmark(self, identity: Identity, data: BookmarkCreate) -> Bookmark:
        """Create a bookmark owned by the caller."""
        bookmark = Bookmark(owner_id=identity.user_id, **data.model_dump())
        self.db.add(bookmark)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_foreign_key_violation(e):
                # Token outlived its account
                raise UnauthenticatedError("User not found") from e
            raise
        self.db.refresh(bookmark)

        logger.info(f"User {identity.user_id} created bookmark {bookmark.id}")
        return bookmark

    def get_owned_bookmark(self, identity: Identity, bookmark_id: int) -> Bookmark:
        """Get a bookmark the caller is allowed to mutate.

        Existence is checked before ownership: an unknown id is a 404, an id
        owned by someone else is a 403.
        """
        bookmark = self.db.query(Bookmark).filter(Bookmark.id == bookmark_id).first()
        if not bookmark:
            raise BookmarkNotFoundError()
        if bookmark.owner_id != identity.user_id:
            logger.warning(
                f"User {identity.user_id} denied access to bookmark {bookmark_id} "
                f"owned by user {bookmark.owner_id}"
            )
            raise ForbiddenError()
        return bookmark

    def update_bookmark(
        self, identity: Identity, bookmark_id: int, data: BookmarkUpdate
    ) -> Bookmark:
        """Apply the fields sent in ``data`` to a bookmark the caller owns."""
        bookmark = self.get_owned_bookmark(identity, bookmark_id)

        changes = data.model_dump(exclude_unset=True)
        if changes:
            # Owner-conditional; no row means it was deleted after the check
            updated = (
                self.db.query(Bookmark)
                .filter(Bookmark.id == bookmark_id, Bookmark.owner_id == identity.user_id)
                .update(changes, synchronize_session=False)
            )
            if not updated:
                self.db.rollback()
                raise BookmarkNotFoundError()
            self.db.commit()
            self.db.refresh(bookmark)

        return bookmark

    def delete_bookmark(self, identity: Identity, bookmark_id: int) -> None:
        """Delete a bookmark the caller owns."""
        self.get_owned_bookmark(identity, bookmark_id)

        deleted = (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.owner_id == identity.user_id)
            .delete(synchronize_session=False)
        )
        if not deleted:
            self.db.rollback()
            raise BookmarkNotFoundError()
        self.db.commit()

        logger.info(f"User {identity.user_id} deleted bookmark {bookmark_id}")
