"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from credential_portal.domain.auth.password_hashing import (
    DEFAULT_BCRYPT_ROUNDS,
    MAX_BCRYPT_ROUNDS,
    MIN_BCRYPT_ROUNDS,
)

NonEmptyStr = Annotated[str, Field(min_length=1)]
BcryptRounds = Annotated[int, Field(ge=MIN_BCRYPT_ROUNDS, le=MAX_BCRYPT_ROUNDS)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    password_hash_rounds: BcryptRounds = Field(
        default=DEFAULT_BCRYPT_ROUNDS,
        validation_alias="PASSWORD_HASH_ROUNDS",
    )
    # Bootstrap values must be non-empty; this is a startup config rule, not a
    # password policy for registered users.
    bootstrap_username: NonEmptyStr | None = Field(
        default=None,
        validation_alias="BOOTSTRAP_USERNAME",
    )
    bootstrap_password: NonEmptyStr | None = Field(
        default=None,
        validation_alias="BOOTSTRAP_PASSWORD",
    )
    bootstrap_password_file: NonEmptyStr | None = Field(
        default=None,
        validation_alias="BOOTSTRAP_PASSWORD_FILE",
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
