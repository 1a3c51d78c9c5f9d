"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .signin import SignInRequest, SignInUseCase
from .signup import AuthResponse, SignUpRequest, SignUpUseCase

__all__ = [
    "AuthResponse",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "SignInRequest",
    "SignInUseCase",
    "SignUpRequest",
    "SignUpUseCase",
]
