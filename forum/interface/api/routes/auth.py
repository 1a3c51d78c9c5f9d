"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel

from forum.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    SignInRequest,
    SignInUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from forum.config import Settings
from forum.domain.error import (
    EmailAlreadyRegisteredError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
)
from forum.interface.api.session import clear_auth_cookie, get_token, set_auth_cookie
from forum.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignUpRequest,
    response: Response,
    use_case: FromDishka[SignUpUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account with email and password and sign in.

    Raises:
        HTTPException: 400 for invalid input, 409 if the email is taken
    """
    try:
        result = await use_case.execute(request)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmailAlreadyRegisteredError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Email already registered"
        )

    set_auth_cookie(response, result.token, settings)
    logger.info(f"User signed up: {result.user.id}")
    return result


@router.post("/signin", response_model=AuthResponse)
async def signin(
    request: SignInRequest,
    response: Response,
    use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Sign in with email and password.

    Raises:
        HTTPException: 401 if the credentials don't match
    """
    try:
        result = await use_case.execute(request)
    except UnauthenticatedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    clear_auth_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> GetCurrentUserResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a session: returns authenticated=false instead
    of an error.
    """
    token = get_token(request, settings)
    if not token:
        return GetCurrentUserResponse(authenticated=False)

    try:
        return await use_case.execute(GetCurrentUserRequest(token=token))
    except JWTError:
        # Invalid or expired token
        return GetCurrentUserResponse(authenticated=False)
    except NotFoundError:
        # Valid token for a user that no longer exists
        return GetCurrentUserResponse(authenticated=False)
