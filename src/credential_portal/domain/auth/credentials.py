"""Shared helpers for user credential inputs."""

from __future__ import annotations


class InvalidUsernameError(ValueError):
    """Raised when a username cannot be used as a store key."""


def require_username(*, username: str) -> str:
    """Return username unchanged and reject empty values.

    Usernames are case-sensitive store keys, so no normalization is applied.
    """

    if not username:
        raise InvalidUsernameError("username cannot be empty")
    return username
