# taskmanager/security.py
"""Password hashing (bcrypt) and session token issuance/verification (JWT)."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from taskmanager.errors import AuthenticationError

TOKEN_ALGORITHM = "HS256"
# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as asserted by a verified session token."""

    user_id: int
    username: str
    email: str


def hash_password(password: str, rounds: int = 12) -> str:
    """Return a salted bcrypt hash; the salt and cost are embedded in the output."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a candidate password against a stored bcrypt hash."""
    candidate = password.encode("utf-8")
    if len(candidate) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def create_access_token(
    identity: Identity,
    secret_key: str,
    ttl: timedelta,
    now: Optional[datetime] = None,
) -> str:
    """Issue a signed token carrying the identity claims and an expiry."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(identity.user_id),
        "username": identity.username,
        "email": identity.email,
        "iat": issued_at,
        "exp": issued_at + ttl,
    }
    return jwt.encode(claims, secret_key, algorithm=TOKEN_ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> Identity:
    """Verify signature and expiry, then return the embedded identity.

    Every failure mode (bad signature, malformed token, expired token,
    missing or ill-typed claims) raises AuthenticationError.
    """
    try:
        claims = jwt.decode(
            token,
            secret_key,
            algorithms=[TOKEN_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError("Invalid token") from e

    try:
        user_id = int(claims["sub"])
    except (TypeError, ValueError) as e:
        raise AuthenticationError("Invalid token") from e

    username = claims.get("username")
    email = claims.get("email")
    if not isinstance(username, str) or not isinstance(email, str):
        raise AuthenticationError("Invalid token")

    return Identity(user_id=user_id, username=username, email=email)
