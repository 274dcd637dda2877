"""Unit tests for AuthService."""

import pytest

from tube.domain.error import (
    ConflictError,
    UnauthenticatedError,
    ValidationError,
)
from tube.domain.repository import UserRepository
from tube.domain.service import AuthService, JWTService, PasswordHasher, SessionService
from tube.domain.value import Email, TokenKind, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PASSWORD = "s3cret-password"


async def _signup(auth_service: AuthService, name: str = "alice"):
    return await auth_service.signup(
        Username(name), Email(f"{name}@example.com"), PASSWORD
    )


class TestSignup:
    """Tests for signup."""

    @pytest.mark.asyncio
    async def test_signup_stores_hash_and_opens_session(self, unit_env):
        """Signup should hash the password and register the refresh token."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        session_service = await unit_env.get(SessionService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        session = await _signup(auth_service)

        # Assert
        stored = await user_repo.find_by_id(session.user.id)
        assert stored is not None
        assert stored.password_hash != PASSWORD
        assert stored.password_hash.startswith("$2")
        assert await session_service.matches(session.user.id, session.refresh_token)

    @pytest.mark.asyncio
    async def test_signup_issues_both_token_kinds(self, unit_env):
        """Signup should return a verifiable access and refresh token."""
        auth_service = await unit_env.get(AuthService)
        jwt_service = await unit_env.get(JWTService)

        session = await _signup(auth_service)

        assert jwt_service.verify(session.access_token, TokenKind.ACCESS).sub == str(
            session.user.id
        )
        assert jwt_service.verify(session.refresh_token, TokenKind.REFRESH)

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        """Signing up twice with one email should conflict."""
        auth_service = await unit_env.get(AuthService)
        await _signup(auth_service)

        with pytest.raises(ConflictError):
            await auth_service.signup(Username("other"), Email("alice@example.com"), PASSWORD)

    @pytest.mark.asyncio
    async def test_password_over_72_bytes_rejected(self, unit_env):
        """Passwords bcrypt would truncate should be refused."""
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            await auth_service.signup(
                Username("alice"), Email("alice@example.com"), "é" * 37
            )


class TestLogin:
    """Tests for login."""

    @pytest.mark.asyncio
    async def test_login_with_correct_password(self, unit_env):
        """Correct credentials should open a session."""
        auth_service = await unit_env.get(AuthService)
        signed_up = await _signup(auth_service)

        session = await auth_service.login(Email("alice@example.com"), PASSWORD)

        assert session.user.id == signed_up.user.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_alike(self, unit_env):
        """Wrong password and unknown email should fail with one message."""
        auth_service = await unit_env.get(AuthService)
        await _signup(auth_service)

        with pytest.raises(UnauthenticatedError) as wrong_password:
            await auth_service.login(Email("alice@example.com"), "wrong-password")
        with pytest.raises(UnauthenticatedError) as unknown_email:
            await auth_service.login(Email("nobody@example.com"), PASSWORD)

        assert str(wrong_password.value) == str(unknown_email.value)

    @pytest.mark.asyncio
    async def test_unknown_email_still_runs_bcrypt(self, unit_env, monkeypatch):
        """An unknown email should cost one bcrypt check like a wrong password."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        hasher = await unit_env.get(PasswordHasher)
        checked: list[str] = []
        verify = hasher.verify

        async def counting_verify(password, password_hash):
            checked.append(password_hash)
            return await verify(password, password_hash)

        monkeypatch.setattr(hasher, "verify", counting_verify)

        # Act
        with pytest.raises(UnauthenticatedError):
            await auth_service.login(Email("nobody@example.com"), PASSWORD)

        # Assert
        assert len(checked) == 1
        assert checked[0].startswith("$2")

    @pytest.mark.asyncio
    async def test_deactivated_user_cannot_login(self, unit_env):
        """A deactivated account should not log in."""
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)
        signed_up = await _signup(auth_service)
        await user_repo.set_active(signed_up.user.id, False)

        with pytest.raises(UnauthenticatedError):
            await auth_service.login(Email("alice@example.com"), PASSWORD)

    @pytest.mark.asyncio
    async def test_second_login_supersedes_first(self, unit_env):
        """Only the most recent login's refresh token should work."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await _signup(auth_service)
        first = await auth_service.login(Email("alice@example.com"), PASSWORD)
        second = await auth_service.login(Email("alice@example.com"), PASSWORD)

        # Act / Assert
        with pytest.raises(UnauthenticatedError):
            await auth_service.refresh(first.refresh_token)
        refreshed = await auth_service.refresh(second.refresh_token)
        assert refreshed.user.id == second.user.id


class TestRefresh:
    """Tests for refresh."""

    @pytest.mark.asyncio
    async def test_refresh_rotates_token(self, unit_env):
        """Refresh should return a new refresh token and retire the old one."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        session = await _signup(auth_service)

        # Act
        rotated = await auth_service.refresh(session.refresh_token)

        # Assert
        assert rotated.refresh_token != session.refresh_token
        with pytest.raises(UnauthenticatedError, match="Invalid refresh token"):
            await auth_service.refresh(session.refresh_token)
        assert await auth_service.refresh(rotated.refresh_token)

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        """No refresh token should fail with a specific message."""
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(UnauthenticatedError, match="not provided"):
            await auth_service.refresh(None)

    @pytest.mark.asyncio
    async def test_access_token_cannot_refresh(self, unit_env):
        """An access token presented as refresh token should be rejected."""
        auth_service = await unit_env.get(AuthService)
        session = await _signup(auth_service)

        with pytest.raises(UnauthenticatedError):
            await auth_service.refresh(session.access_token)

    @pytest.mark.asyncio
    async def test_refresh_after_logout_rejected(self, unit_env):
        """Logout should revoke the refresh token."""
        auth_service = await unit_env.get(AuthService)
        session = await _signup(auth_service)

        await auth_service.logout(session.user)

        with pytest.raises(UnauthenticatedError):
            await auth_service.refresh(session.refresh_token)

    @pytest.mark.asyncio
    async def test_refresh_for_deactivated_user_rejected(self, unit_env):
        """A deactivated user should not refresh even with the live token."""
        auth_service = await unit_env.get(AuthService)
        user_repo = await unit_env.get(UserRepository)
        session = await _signup(auth_service)
        await user_repo.set_active(session.user.id, False)

        with pytest.raises(UnauthenticatedError):
            await auth_service.refresh(session.refresh_token)
