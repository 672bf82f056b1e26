"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field, StrictStr


class UserCredentials(BaseModel):
    """Signup and signin request."""

    email: EmailStr = Field(..., max_length=255)
    password: StrictStr = Field(..., min_length=1)


class Token(BaseModel):
    """JWT token response."""

    access_token: str
