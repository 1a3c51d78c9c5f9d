"""Sign-up use case."""

from typing import Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from forum.application.usecase.common import UserInfo
from forum.domain.error import InvalidInputError
from forum.domain.service import JWTService, UserService
from forum.domain.value import Email


class SignUpRequest(BaseModel):
    """Sign-up request."""

    email: str
    password: str
    name: Optional[str] = None


class AuthResponse(BaseModel):
    """Authenticated user plus their session token."""

    user: UserInfo
    token: str


class SignUpUseCase:
    """Use case for creating an account with email and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize sign-up use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignUpRequest) -> AuthResponse:
        """Register the user and issue a session token.

        Raises:
            InvalidInputError: If the email or password is invalid
            EmailAlreadyRegisteredError: If the email is taken
        """
        try:
            email = Email(request.email)
        except PydanticValidationError:
            raise InvalidInputError("Invalid email address")

        user = await self.user_service.register(email, request.name, request.password)
        token = self.jwt_service.create_token(str(user.id), user.email.root)

        return AuthResponse(user=UserInfo.from_user(user), token=token)
