"""Application authentication service for credential verification."""

from __future__ import annotations

import asyncio
import secrets
from dataclasses import dataclass
from enum import StrEnum

from credential_portal.application.ports.password_hasher_port import PasswordHasherPort
from credential_portal.application.ports.user_repository_port import (
    UserRecord,
    UserRepositoryPort,
)


class AuthOutcome(StrEnum):
    """Supported authentication outcomes."""

    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"


@dataclass(frozen=True)
class AuthResult:
    """Authentication result model."""

    outcome: AuthOutcome
    user: UserRecord | None = None


class AuthService:
    """Authenticate submitted credentials against the user store."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        password_hasher: PasswordHasherPort,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._dummy_password_hash: str | None = None

    async def authenticate(self, *, username: str, password: str) -> AuthResult:
        """Return SUCCESS with the user, or INVALID_CREDENTIALS.

        Unknown usernames and wrong passwords produce the same outcome and both
        pay for one full password verification, so response time does not
        reveal whether an account exists.
        """

        user = self._users.get(username=username)
        if user is None:
            await asyncio.to_thread(
                self._password_hasher.verify_password,
                password=password,
                password_hash=await self._get_dummy_password_hash(),
            )
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS, user=None)

        is_valid = await asyncio.to_thread(
            self._password_hasher.verify_password,
            password=password,
            password_hash=user.password_hash,
        )
        if not is_valid:
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS, user=None)

        return AuthResult(outcome=AuthOutcome.SUCCESS, user=user)

    async def _get_dummy_password_hash(self) -> str:
        """Return a hash at the configured cost that no submitted password matches."""

        if self._dummy_password_hash is None:
            self._dummy_password_hash = await asyncio.to_thread(
                self._password_hasher.hash_password,
                secrets.token_urlsafe(32),
            )
        return self._dummy_password_hash
