"""Bcrypt password hasher adapter."""

from __future__ import annotations

import base64
import hashlib

import bcrypt

from credential_portal.application.ports.password_hasher_port import (
    PasswordHasherPort,
    PasswordHashingError,
)
from credential_portal.domain.auth.password_hashing import (
    DEFAULT_BCRYPT_ROUNDS,
    MAX_BCRYPT_ROUNDS,
    MIN_BCRYPT_ROUNDS,
)


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt.

    Plaintext is pre-digested with SHA-256 so any string is accepted: bcrypt
    only reads 72 bytes and rejects NUL bytes, the base64 digest has neither
    problem. The stored value is the standard `$2b$<cost>$...` string, so
    verification reads salt and cost back from it.
    """

    def __init__(self, *, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        if not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
            raise ValueError(
                f"bcrypt rounds must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}"
            )
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash_password(self, password: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            hashed = bcrypt.hashpw(_prehash(password), salt)
        except OSError as exc:
            raise PasswordHashingError("password hashing backend unavailable") from exc
        return hashed.decode("ascii")

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))
        except ValueError:
            return False


def _prehash(password: str) -> bytes:
    digest = hashlib.sha256(password.encode("utf-8", errors="surrogatepass")).digest()
    return base64.b64encode(digest)
