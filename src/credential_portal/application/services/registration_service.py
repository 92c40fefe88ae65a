"""Application service for user registration."""

from __future__ import annotations

import asyncio

from credential_portal.application.ports.password_hasher_port import PasswordHasherPort
from credential_portal.application.ports.user_repository_port import (
    UserRecord,
    UserRepositoryPort,
)
from credential_portal.domain.auth.credentials import require_username


class RegistrationService:
    """Hash submitted credentials and store the resulting user record."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        password_hasher: PasswordHasherPort,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    async def register(self, *, username: str, password: str) -> UserRecord:
        """Register one user, replacing any previous record for the username.

        Raises `InvalidUsernameError` for an empty username and lets
        `PasswordHashingError` propagate; in both cases nothing is stored.
        """

        require_username(username=username)
        password_hash = await asyncio.to_thread(self._password_hasher.hash_password, password)
        record = UserRecord(username=username, password_hash=password_hash)
        self._users.put(record)
        return record
