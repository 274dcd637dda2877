"""Password hashing domain service."""

import asyncio

import logfire

from tube.config import AuthSettings
from tube.util.password import hash_password, verify_password

from .base import Service

_DUMMY_PASSWORD = "tube-dummy-password"

# Digest of _DUMMY_PASSWORD per bcrypt cost factor, computed on first use
_DUMMY_DIGESTS: dict[int, str] = {}


class PasswordHasher(Service):
    """One-way hashing and verification of account passwords.

    bcrypt is deliberately slow, so both operations run in a worker thread
    to keep the event loop free.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password hasher.

        Args:
            auth_settings: Authentication settings (bcrypt cost factor)
        """
        self.rounds = auth_settings.bcrypt_rounds

    async def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            bcrypt digest
        """
        with logfire.span("password_hasher.hash"):
            return await asyncio.to_thread(hash_password, password, self.rounds)

    async def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a digest.

        Args:
            password: Plaintext password
            password_hash: Stored bcrypt digest

        Returns:
            True on match. False on mismatch or a malformed digest.
        """
        with logfire.span("password_hasher.verify"):
            return await asyncio.to_thread(verify_password, password, password_hash)

    async def verify_dummy(self, password: str) -> None:
        """Spend one verification on a throwaway digest.

        Lets a login for an unknown account take as long as a wrong
        password does.

        Args:
            password: Plaintext password from the request
        """
        digest = _DUMMY_DIGESTS.get(self.rounds)
        if digest is None:
            digest = await asyncio.to_thread(hash_password, _DUMMY_PASSWORD, self.rounds)
            _DUMMY_DIGESTS[self.rounds] = digest
        await self.verify(password, digest)
