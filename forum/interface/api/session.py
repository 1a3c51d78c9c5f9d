"""Session token helpers shared by the routes."""

from fastapi import HTTPException, Request, Response, status

from forum.config import Settings
from forum.domain.service import JWTService


def get_token(request: Request, settings: Settings) -> str | None:
    """Read the session token from the auth cookie or a Bearer header."""
    token = request.cookies.get(settings.auth.cookie_name)
    if token:
        return token

    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def get_optional_user_id(
    request: Request, settings: Settings, jwt_service: JWTService
) -> str | None:
    """Resolve the caller's user ID, or None for anonymous callers."""
    return jwt_service.get_user_id_from_token(get_token(request, settings))


def require_user_id(
    request: Request, settings: Settings, jwt_service: JWTService
) -> str:
    """Resolve the caller's user ID.

    Raises:
        HTTPException: 401 if there is no valid session
    """
    user_id = get_optional_user_id(request, settings, jwt_service)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user_id


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session cookie to a response.

    Production serves the frontend cross-site, which needs
    samesite="none" and therefore secure=True.
    """
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response, settings: Settings) -> None:
    """Remove the session cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
