"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import Token, UserCredentials
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.schemas.errors import ErrorResponse, FieldViolation, ValidationErrorResponse
from src.schemas.user import UserResponse, UserUpdate

__all__ = [
    "UserCredentials",
    "Token",
    "UserResponse",
    "UserUpdate",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
    "ErrorResponse",
    "FieldViolation",
    "ValidationErrorResponse",
]
