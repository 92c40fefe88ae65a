"""Work-factor bounds for salted password hashing."""

from __future__ import annotations

DEFAULT_BCRYPT_ROUNDS = 14
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31
