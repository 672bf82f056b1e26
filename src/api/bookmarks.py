"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import CurrentIdentity, get_bookmark_service
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.services.bookmark_service import BookmarkService

Bookmarks = Annotated[BookmarkService, Depends(get_bookmark_service)]


def get_bookmarks(identity: CurrentIdentity, bookmark_service: Bookmarks):
    """Get all bookmarks owned by the current user."""
    return bookmark_service.list_bookmarks(identity)


def get_bookmark(bookmark_id: int, identity: CurrentIdentity, bookmark_service: Bookmarks):
    """Get one of the current user's bookmarks. Empty body if there is none."""
    bookmark = bookmark_service.get_bookmark(identity, bookmark_id)
    if bookmark is None:
        return Response(status_code=status.HTTP_200_OK)
    return bookmark


def create_bookmark(
    bookmark_data: BookmarkCreate,
    identity: CurrentIdentity,
    bookmark_service: Bookmarks,
):
    """Create a new bookmark."""
    return bookmark_service.create_bookmark(identity, bookmark_data)


def update_bookmark(
    bookmark_id: int,
    bookmark_data: BookmarkUpdate,
    identity: CurrentIdentity,
    bookmark_service: Bookmarks,
):
    """Update a bookmark."""
    return bookmark_service.update_bookmark(identity, bookmark_id, bookmark_data)


def delete_bookmark(bookmark_id: int, identity: CurrentIdentity, bookmark_service: Bookmarks):
    """Delete a bookmark."""
    bookmark_service.delete_bookmark(identity, bookmark_id)


router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])
router.add_api_route(
    "", get_bookmarks, methods=["GET"], response_model=list[BookmarkResponse]
)
router.add_api_route(
    "/{bookmark_id}", get_bookmark, methods=["GET"], response_model=BookmarkResponse | None
)
router.add_api_route(
    "",
    create_bookmark,
    methods=["POST"],
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
)
router.add_api_route(
    "/{bookmark_id}", update_bookmark, methods=["PUT"], response_model=BookmarkResponse
)
router.add_api_route(
    "/{bookmark_id}",
    delete_bookmark,
    methods=["DELETE"],
    status_code=status.HTTP_204_NO_CONTENT,
)
