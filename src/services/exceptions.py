"""Shared exceptions for service layer operations.

Each exception carries the HTTP status it is rendered with; the application
registers a single handler for ``ServiceError``.
"""

from fastapi import status


class ServiceError(Exception):
    """Base exception for failures that end the request."""

    status_code = status.HTTP_400_BAD_REQUEST
    headers: dict[str, str] | None = None

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateEmailError(ServiceError):
    """Raised when an email is already registered to another user."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self) -> None:
        super().__init__("Email has already been taken")


class UserNotFoundError(ServiceError):
    """Raised when signing in with an email that has no account."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("User not found")


class InvalidCredentialsError(ServiceError):
    """Raised when the password does not match the stored hash."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__("Password incorrect")


class UnauthenticatedError(ServiceError):
    """Raised when a request carries no usable bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, message: str = "Invalid authentication credentials") -> None:
        super().__init__(message)


class BookmarkNotFoundError(ServiceError):
    """Raised when a bookmark id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Bookmark not found")


class ForbiddenError(ServiceError):
    """Raised when a bookmark exists but belongs to another user."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self) -> None:
        super().__init__("Access denied")
