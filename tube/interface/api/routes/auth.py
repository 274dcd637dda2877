"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from tube.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    RefreshRequest,
    RefreshResponse,
    RefreshUseCase,
    SignupRequest,
    SignupUseCase,
)
from tube.config import AuthSettings
from tube.domain.error import UnauthenticatedError
from tube.domain.service import AuthGuard
from tube.interface.api.cookies import clear_auth_cookies, set_auth_cookies
from tube.interface.api.deps import authenticate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

# The refresh token travels only in its HTTP-only cookie
TOKEN_BODY_EXCLUDE = {"refresh_token"}


@router.post(
    "/signup",
    response_model=AuthResponse,
    response_model_exclude=TOKEN_BODY_EXCLUDE,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    request: SignupRequest,
    response: Response,
    signup_use_case: FromDishka[SignupUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> AuthResponse:
    """Register a new account and start its session.

    Args:
        request: Username, email and password
        response: FastAPI response object
        signup_use_case: Signup use case from DI
        auth_settings: Auth settings from DI

    Returns:
        New user and access token; tokens are also set as cookies
    """
    result = await signup_use_case.execute(request)
    set_auth_cookies(response, result.access_token, result.refresh_token, auth_settings)
    logger.info(f"User signed up: {result.user.id}")
    return result


@router.post(
    "/login", response_model=AuthResponse, response_model_exclude=TOKEN_BODY_EXCLUDE
)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> AuthResponse:
    """Log in with email and password.

    Any earlier session of the same user stops working.

    Args:
        request: Email and password
        response: FastAPI response object
        login_use_case: Login use case from DI
        auth_settings: Auth settings from DI

    Returns:
        User and access token; tokens are also set as cookies
    """
    result = await login_use_case.execute(request)
    set_auth_cookies(response, result.access_token, result.refresh_token, auth_settings)
    return result


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    response_model_exclude=TOKEN_BODY_EXCLUDE,
)
async def refresh(
    http_request: Request,
    response: Response,
    refresh_use_case: FromDishka[RefreshUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> RefreshResponse | JSONResponse:
    """Exchange the refresh cookie for a new access token.

    The refresh cookie is rotated; the old refresh token stops working.

    Args:
        http_request: Incoming request carrying the refresh cookie
        response: FastAPI response object
        refresh_use_case: Refresh use case from DI
        auth_settings: Auth settings from DI

    Returns:
        New access token
    """
    refresh_token = http_request.cookies.get(auth_settings.refresh_cookie_name)
    try:
        result = await refresh_use_case.execute(
            RefreshRequest(refresh_token=refresh_token)
        )
    except UnauthenticatedError as e:
        # A rejected refresh token is useless to the client, drop it
        error_response = JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(e)}
        )
        clear_auth_cookies(error_response, auth_settings)
        return error_response

    set_auth_cookies(response, result.access_token, result.refresh_token, auth_settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    http_request: Request,
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
) -> LogoutResponse:
    """Revoke the caller's refresh token and clear auth cookies.

    Requires authentication.

    Args:
        http_request: Incoming request
        response: FastAPI response object
        logout_use_case: Logout use case from DI
        auth_guard: Auth guard from DI
        auth_settings: Auth settings from DI

    Returns:
        Logout confirmation
    """
    user = await authenticate(http_request, auth_guard, auth_settings)
    result = await logout_use_case.execute(user)
    clear_auth_cookies(response, auth_settings)
    return result


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    http_request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
) -> GetCurrentUserResponse:
    """Get the authenticated user.

    Args:
        http_request: Incoming request
        get_current_user_use_case: Get current user use case from DI
        auth_guard: Auth guard from DI
        auth_settings: Auth settings from DI

    Returns:
        User information
    """
    user = await authenticate(http_request, auth_guard, auth_settings)
    return await get_current_user_use_case.execute(user)
