# taskmanager/services/auth.py
"""Registration, login, and token verification."""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from taskmanager.config import Settings
from taskmanager.errors import AuthenticationError, ConflictError, ValidationError
from taskmanager.models import EMAIL_MAX_LENGTH, USERNAME_MAX_LENGTH, User
from taskmanager.security import (
    BCRYPT_MAX_PASSWORD_BYTES,
    Identity,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: Identity


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class AuthService:
    """Account operations bound to one Settings instance."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def register(
        self,
        session: Session,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> int:
        """Create a user and return its id."""
        if _is_blank(username) or _is_blank(email) or _is_blank(password):
            raise ValidationError("All fields are required")
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )
        username = username.strip()
        email = email.strip()
        if len(username) > USERNAME_MAX_LENGTH:
            raise ValidationError(
                f"Username must be at most {USERNAME_MAX_LENGTH} characters"
            )
        if len(email) > EMAIL_MAX_LENGTH:
            raise ValidationError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")

        if session.exec(select(User).where(User.username == username)).first():
            raise ConflictError("Username already exists")
        if session.exec(select(User).where(User.email == email)).first():
            raise ConflictError("Email already exists")

        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password, rounds=self.settings.bcrypt_rounds),
        )
        session.add(user)
        try:
            session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration.
            session.rollback()
            logger.warning("Registration conflict for %s: %s", username, e.orig)
            raise ConflictError("Username or email already exists") from e
        session.refresh(user)

        logger.info("User registered successfully: %s", username)
        return user.id

    def login(
        self, session: Session, username: Optional[str], password: Optional[str]
    ) -> LoginResult:
        """Check credentials and issue a session token."""
        if _is_blank(username) or password is None:
            raise AuthenticationError(INVALID_CREDENTIALS)

        user = session.exec(select(User).where(User.username == username.strip())).first()
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt for %s", username.strip())
            raise AuthenticationError(INVALID_CREDENTIALS)

        identity = Identity(user_id=user.id, username=user.username, email=user.email)
        token = create_access_token(
            identity,
            self.settings.jwt_secret_key,
            ttl=timedelta(days=self.settings.token_ttl_days),
        )
        logger.info("User logged in successfully: %s", user.username)
        return LoginResult(token=token, user=identity)

    def verify_token(self, token: str) -> Identity:
        return decode_access_token(token, self.settings.jwt_secret_key)
