"""Session tokens (HS256 JWTs via PyJWT).

A token names the user it was issued to and expires after
``AuthSettings.jwt_expiry_days``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    email: str
    exp: datetime


class JWTError(Exception):
    """Token is malformed, tampered with or expired."""


def create_token(user_id: str, email: str, settings: AuthSettings) -> str:
    """Sign a session token for a user."""
    expires = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "email": email, "exp": expires}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token can't be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except PydanticValidationError:
        raise JWTError("Invalid token")
