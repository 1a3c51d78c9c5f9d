"""Sign-in use case."""

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from forum.application.usecase.common import UserInfo
from forum.domain.error import UnauthenticatedError
from forum.domain.service import JWTService, UserService
from forum.domain.value import Email

from .signup import AuthResponse


class SignInRequest(BaseModel):
    """Sign-in request."""

    email: str
    password: str


class SignInUseCase:
    """Use case for signing in with email and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize sign-in use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignInRequest) -> AuthResponse:
        """Check credentials and issue a session token.

        Raises:
            UnauthenticatedError: If the credentials don't match
        """
        try:
            email = Email(request.email)
        except PydanticValidationError:
            # Same message as a wrong password; don't reveal which part failed
            raise UnauthenticatedError("Invalid email or password")

        user = await self.user_service.authenticate(email, request.password)
        token = self.jwt_service.create_token(str(user.id), user.email.root)

        return AuthResponse(user=UserInfo.from_user(user), token=token)
