"""Unit tests for authentication use cases."""

from uuid import UUID

import pytest

from tube.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutUseCase,
    RefreshRequest,
    RefreshUseCase,
    SignupRequest,
    SignupUseCase,
)
from tube.domain.error import UnauthenticatedError, ValidationError
from tube.domain.service import UserService
from tube.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _signup_request(**overrides) -> SignupRequest:
    fields = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "s3cret-password",
    }
    fields.update(overrides)
    return SignupRequest(**fields)


class TestSignupUseCase:
    """Tests for SignupUseCase."""

    @pytest.mark.asyncio
    async def test_signup_returns_user_and_tokens(self, unit_env):
        """Signup should return the public user view and both tokens."""
        # Arrange
        use_case = await unit_env.get(SignupUseCase)

        # Act
        response = await use_case.execute(_signup_request(email="Alice@Example.com"))

        # Assert
        assert response.user.username == "alice"
        assert response.user.email == "alice@example.com"
        assert response.access_token
        assert response.refresh_token

    @pytest.mark.asyncio
    async def test_body_hides_refresh_token_and_uses_camel_case(self, unit_env):
        """Serialized for HTTP, the body should carry accessToken only."""
        use_case = await unit_env.get(SignupUseCase)

        response = await use_case.execute(_signup_request())
        body = response.model_dump(by_alias=True, exclude={"refresh_token"})

        assert "accessToken" in body
        assert "refreshToken" not in body
        assert "password_hash" not in body["user"]

    @pytest.mark.asyncio
    async def test_invalid_email_is_validation_error(self, unit_env):
        """A malformed email should be rejected as a validation error."""
        use_case = await unit_env.get(SignupUseCase)

        with pytest.raises(ValidationError, match="email"):
            await use_case.execute(_signup_request(email="not-an-email"))

    @pytest.mark.asyncio
    async def test_invalid_username_is_validation_error(self, unit_env):
        """A malformed username should be rejected as a validation error."""
        use_case = await unit_env.get(SignupUseCase)

        with pytest.raises(ValidationError, match="username"):
            await use_case.execute(_signup_request(username="a b"))


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_after_signup(self, unit_env):
        signup = await unit_env.get(SignupUseCase)
        login = await unit_env.get(LoginUseCase)
        created = await signup.execute(_signup_request())

        response = await login.execute(
            LoginRequest(email="alice@example.com", password="s3cret-password")
        )

        assert response.user.id == created.user.id

    @pytest.mark.asyncio
    async def test_missing_fields_are_validation_errors(self, unit_env):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(ValidationError):
            await login.execute(LoginRequest(email="", password="x"))

    @pytest.mark.asyncio
    async def test_malformed_email_looks_like_bad_credentials(self, unit_env):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(UnauthenticatedError, match="Invalid email or password"):
            await login.execute(LoginRequest(email="nope", password="whatever1"))


class TestRefreshAndLogout:
    """Tests for RefreshUseCase, LogoutUseCase and GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_refresh_then_logout(self, unit_env):
        """Refresh should rotate; logout should revoke the rotated token."""
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        refresh = await unit_env.get(RefreshUseCase)
        logout = await unit_env.get(LogoutUseCase)
        current = await unit_env.get(GetCurrentUserUseCase)
        created = await signup.execute(_signup_request())

        # Act
        rotated = await refresh.execute(
            RefreshRequest(refresh_token=created.refresh_token)
        )
        profile = await current.execute(
            await _user_from(unit_env, created.user.id)
        )
        result = await logout.execute(await _user_from(unit_env, created.user.id))

        # Assert
        assert rotated.refresh_token != created.refresh_token
        assert profile.user.username == "alice"
        assert result.success
        with pytest.raises(UnauthenticatedError):
            await refresh.execute(RefreshRequest(refresh_token=rotated.refresh_token))


async def _user_from(unit_env, user_id: str):
    user_service = await unit_env.get(UserService)
    return await user_service.find_by_id(UserId(UUID(user_id)))
