"""Auth cookie helpers."""

from fastapi import Response

from tube.config import AuthSettings

# Access cookie is readable by every route; refresh cookie only by /auth
ACCESS_COOKIE_PATH = "/"
COOKIE_SAMESITE = "lax"


def set_auth_cookies(
    response: Response, access_token: str, refresh_token: str, settings: AuthSettings
) -> None:
    """Attach access and refresh tokens as HTTP-only cookies.

    Args:
        response: Outgoing response
        access_token: Signed access token
        refresh_token: Signed refresh token
        settings: Auth settings with cookie names, TTLs and the secure flag
    """
    response.set_cookie(
        key=settings.access_cookie_name,
        value=access_token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=COOKIE_SAMESITE,
        max_age=settings.access_token_ttl_minutes * 60,
        path=ACCESS_COOKIE_PATH,
    )
    response.set_cookie(
        key=settings.refresh_cookie_name,
        value=refresh_token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=COOKIE_SAMESITE,
        max_age=settings.refresh_token_ttl_seconds,
        path=settings.refresh_cookie_path,
    )


def clear_auth_cookies(response: Response, settings: AuthSettings) -> None:
    """Expire both auth cookies with the same path they were set on."""
    response.delete_cookie(
        key=settings.access_cookie_name,
        path=ACCESS_COOKIE_PATH,
        secure=settings.cookie_secure,
        httponly=True,
        samesite=COOKIE_SAMESITE,
    )
    response.delete_cookie(
        key=settings.refresh_cookie_name,
        path=settings.refresh_cookie_path,
        secure=settings.cookie_secure,
        httponly=True,
        samesite=COOKIE_SAMESITE,
    )
