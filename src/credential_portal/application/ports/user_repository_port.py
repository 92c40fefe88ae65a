"""Port for credential record storage used by registration and login."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class UserRecord:
    """Stored credential for one registered user.

    `password_hash` always carries hasher output, never plaintext.
    """

    username: str
    password_hash: str


class UserRepositoryPort(Protocol):
    """Credential store contract."""

    def put(self, record: UserRecord) -> None:
        """Insert record, replacing any existing record with the same username."""

    def get(self, *, username: str) -> UserRecord | None:
        """Return record for exact username or None when unregistered."""

    def count(self) -> int:
        """Return number of stored records."""
