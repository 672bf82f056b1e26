"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.database import is_unique_violation
from src.models.user import User
from src.services.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UnauthenticatedError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, decoded from a verified token."""

    user_id: int
    email: str


class PasswordHasher:
    """Salted bcrypt hashing with a fixed cost factor."""

    def __init__(self, rounds: int = 12):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return self.context.verify(plain_password, hashed_password)


class TokenService:
    """Mints and verifies signed access tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_minutes: int = 60):
        self.secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(minutes=expiration_minutes)

    def mint(self, user_id: int, email: str) -> str:
        """Create a JWT access token."""
        issued_at = datetime.now(UTC)
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.expiration,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        """Decode and validate a JWT token.

        Signature, expiry and the presence of the identity claims are all
        checked; any failure raises ``UnauthenticatedError``.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise UnauthenticatedError() from e

        subject = payload.get("sub")
        email = payload.get("email")
        if subject is None or not isinstance(email, str):
            raise UnauthenticatedError()
        try:
            user_id = int(subject)
        except (TypeError, ValueError) as e:
            raise UnauthenticatedError() from e

        return Identity(user_id=user_id, email=email)


class AuthService:
    """Signup and signin against the user table."""

    def __init__(self, db: Session, hasher: PasswordHasher, tokens: TokenService):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens

    def signup(self, email: str, password: str) -> str:
        """Create a user and return an access token for it."""
        user = User(email=email, password_hash=self.hasher.hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise DuplicateEmailError() from e
            raise
        self.db.refresh(user)

        logger.info(f"Signed up user {user.id}")
        return self.tokens.mint(user.id, user.email)

    def signin(self, email: str, password: str) -> str:
        """Check credentials and return an access token."""
        user = self.db.query(User).filter(User.email == email).first()
        if not user:
            raise UserNotFoundError()

        if not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Failed signin for user {user.id}")
            raise InvalidCredentialsError()

        return self.tokens.mint(user.id, user.email)
