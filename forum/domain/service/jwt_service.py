"""JWT domain service."""

import logfire

from forum.config import AuthSettings
from forum.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues session tokens and maps them back to the user they name.

    This is the identity provider for the API: a request's voter or
    author is whoever its token was issued to.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str) -> str:
        """Issue a token for a user who just signed up or in."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Validate a token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Rejected session token", reason=str(e))
            raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """User ID for a token, or None when there is no usable token.

        Routes that allow anonymous callers use this instead of
        ``verify_token``.
        """
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
