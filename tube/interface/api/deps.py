"""Request authentication helpers shared by routes."""

from fastapi import Request

from tube.config import AuthSettings
from tube.domain.model import User
from tube.domain.service import AuthGuard
from tube.domain.value import Role


async def authenticate(
    request: Request, auth_guard: AuthGuard, auth_settings: AuthSettings
) -> User:
    """Resolve the caller and attach the identity to the request.

    Reads the ``Authorization`` header and the access-token cookie. The
    header wins when both are sent.

    Args:
        request: Incoming request
        auth_guard: Auth guard from DI
        auth_settings: Auth settings naming the access cookie

    Returns:
        Authenticated user

    Raises:
        UnauthenticatedError: If the request carries no valid credential
    """
    user = await auth_guard.authenticate(
        request.headers.get("authorization"),
        request.cookies.get(auth_settings.access_cookie_name),
    )
    request.state.identity = user
    return user


async def require_admin(
    request: Request, auth_guard: AuthGuard, auth_settings: AuthSettings
) -> User:
    """Authenticate the caller and require the admin role.

    Raises:
        UnauthenticatedError: If the request carries no valid credential
        ForbiddenError: If the caller is not an admin
    """
    user = await authenticate(request, auth_guard, auth_settings)
    return auth_guard.require_role(user, Role.ADMIN)
