from __future__ import annotations

import pytest

from credential_portal.application.ports.password_hasher_port import PasswordHashingError
from credential_portal.infrastructure.security import password_hasher as password_hasher_module
from credential_portal.infrastructure.security.password_hasher import (
    DEFAULT_BCRYPT_ROUNDS,
    BcryptPasswordHasher,
)


def _hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


def test_hash_password_never_stores_plaintext_and_verifies() -> None:
    hasher = _hasher()
    password = "super-secret-password"

    password_hash = hasher.hash_password(password)

    assert password_hash != password
    assert password not in password_hash
    assert hasher.verify_password(password=password, password_hash=password_hash) is True


def test_wrong_password_fails_verification() -> None:
    hasher = _hasher()
    password_hash = hasher.hash_password("correct")

    assert hasher.verify_password(password="wrong", password_hash=password_hash) is False


def test_hashing_same_password_twice_uses_fresh_salt() -> None:
    hasher = _hasher()

    first = hasher.hash_password("same-password")
    second = hasher.hash_password("same-password")

    assert first != second
    assert hasher.verify_password(password="same-password", password_hash=first) is True
    assert hasher.verify_password(password="same-password", password_hash=second) is True


def test_hash_is_self_describing_with_configured_cost() -> None:
    password_hash = _hasher().hash_password("pw")

    assert password_hash.startswith("$2b$04$")


def test_default_cost_factor_is_fourteen() -> None:
    assert DEFAULT_BCRYPT_ROUNDS == 14
    assert BcryptPasswordHasher().rounds == 14


def test_verification_uses_cost_embedded_in_stored_hash() -> None:
    password_hash = BcryptPasswordHasher(rounds=5).hash_password("pw")

    assert _hasher().verify_password(password="pw", password_hash=password_hash) is True


@pytest.mark.parametrize(
    "password",
    ["", "x" * 200, "emoji-\U0001f512-" * 20, "nul\x00byte", "lone-\ud800-surrogate"],
)
def test_any_string_is_a_valid_password(password: str) -> None:
    hasher = _hasher()

    password_hash = hasher.hash_password(password)

    assert hasher.verify_password(password=password, password_hash=password_hash) is True


def test_long_passwords_differing_after_72_bytes_do_not_collide() -> None:
    hasher = _hasher()
    prefix = "a" * 80
    password_hash = hasher.hash_password(prefix + "one")

    assert hasher.verify_password(password=prefix + "two", password_hash=password_hash) is False


@pytest.mark.parametrize(
    "stored_hash",
    ["", "not-a-hash", "$2b$04$short", "plaintext-password", "$2b$04$ééé"],
)
def test_malformed_stored_hash_fails_verification_without_raising(stored_hash: str) -> None:
    assert _hasher().verify_password(password="pw", password_hash=stored_hash) is False


def test_entropy_failure_raises_password_hashing_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _failing_gensalt(*, rounds: int) -> bytes:
        raise OSError("entropy source unavailable")

    monkeypatch.setattr(password_hasher_module.bcrypt, "gensalt", _failing_gensalt)

    with pytest.raises(PasswordHashingError) as exc_info:
        _hasher().hash_password("pw")

    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.parametrize("rounds", [3, 32])
def test_out_of_range_rounds_are_rejected(rounds: int) -> None:
    with pytest.raises(ValueError):
        BcryptPasswordHasher(rounds=rounds)
