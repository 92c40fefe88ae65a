"""In-memory adapter for credential record storage."""

from __future__ import annotations

import threading

from credential_portal.application.ports.user_repository_port import (
    UserRecord,
    UserRepositoryPort,
)


class InMemoryUserRepository(UserRepositoryPort):
    """Process-lifetime user store keyed by username.

    Every read and write goes through one lock so request handlers running on
    different threads never observe a partially updated mapping.
    """

    def __init__(self) -> None:
        self._records: dict[str, UserRecord] = {}
        self._lock = threading.Lock()

    def put(self, record: UserRecord) -> None:
        """Insert record, last write wins for a repeated username."""

        with self._lock:
            self._records[record.username] = record

    def get(self, *, username: str) -> UserRecord | None:
        """Return record for exact username or None."""

        with self._lock:
            return self._records.get(username)

    def count(self) -> int:
        with self._lock:
            return len(self._records)
