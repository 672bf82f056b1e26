"""Bookmark schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_url_adapter = TypeAdapter(AnyUrl)


def check_link(value: str) -> str:
    """Require an absolute URL, keeping the caller's exact spelling."""
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("must be a valid URL") from None
    return value


Link = Annotated[str, Field(min_length=1, max_length=2048), AfterValidator(check_link)]


class BookmarkCreate(BaseModel):
    """Create a new bookmark."""

    title: str = Field(..., min_length=1, max_length=255)
    link: Link
    description: str | None = Field(None, max_length=10000)


class BookmarkUpdate(BaseModel):
    """Update a bookmark. Only the fields sent are changed."""

    title: str = Field(None, min_length=1, max_length=255)
    link: Link = None
    description: str | None = Field(None, max_length=10000)


class BookmarkResponse(BaseModel):
    """Bookmark response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    link: str
    description: str | None
    created_at: datetime
    updated_at: datetime
