"""Bootstrap helper for seeding an initial user account at startup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from credential_portal.application.ports.user_repository_port import UserRepositoryPort
from credential_portal.application.services.registration_service import RegistrationService
from credential_portal.domain.auth.credentials import InvalidUsernameError, require_username


class BootstrapConfigError(ValueError):
    """Raised when bootstrap-user environment configuration is invalid."""


@dataclass(frozen=True)
class BootstrapUserConfig:
    """Runtime configuration for one-time user bootstrap."""

    username: str
    password: str


class BootstrapOutcome(StrEnum):
    """Outcome states for bootstrap execution."""

    CREATED = "created"
    SKIPPED_USERS_PRESENT = "skipped_users_present"


@dataclass(frozen=True)
class BootstrapResult:
    """Result model for one bootstrap attempt."""

    outcome: BootstrapOutcome
    username: str


def resolve_bootstrap_config(
    *,
    username: str | None,
    password: str | None,
    password_file: str | None,
) -> BootstrapUserConfig | None:
    """Resolve bootstrap-user config from env values or return None when disabled.

    An empty bootstrap password is a configuration error. This applies only to
    the startup account; registration accepts any string as a password.
    """

    any_value_set = any(value is not None for value in (username, password, password_file))
    if username is None:
        if any_value_set:
            raise BootstrapConfigError(
                "BOOTSTRAP_USERNAME is required when bootstrap variables are set"
            )
        return None

    if password is not None and password_file is not None:
        raise BootstrapConfigError(
            "set only one of BOOTSTRAP_PASSWORD or BOOTSTRAP_PASSWORD_FILE"
        )

    resolved_password: str | None = None
    if password_file is not None:
        try:
            resolved_password = Path(password_file).read_text(encoding="utf-8").rstrip("\r\n")
        except OSError as exc:
            raise BootstrapConfigError("failed to read BOOTSTRAP_PASSWORD_FILE") from exc
        if not resolved_password:
            raise BootstrapConfigError("BOOTSTRAP_PASSWORD_FILE is empty")
    elif password is not None:
        resolved_password = password

    if resolved_password is None:
        raise BootstrapConfigError(
            "set BOOTSTRAP_PASSWORD or BOOTSTRAP_PASSWORD_FILE when BOOTSTRAP_USERNAME is set"
        )

    try:
        require_username(username=username)
    except InvalidUsernameError as exc:
        raise BootstrapConfigError("BOOTSTRAP_USERNAME cannot be empty") from exc

    return BootstrapUserConfig(username=username, password=resolved_password)


async def ensure_bootstrap_user(
    *,
    users: UserRepositoryPort,
    registration_service: RegistrationService,
    config: BootstrapUserConfig,
) -> BootstrapResult:
    """Register the configured user when the store is empty, otherwise skip."""

    if users.count() > 0:
        return BootstrapResult(
            outcome=BootstrapOutcome.SKIPPED_USERS_PRESENT,
            username=config.username,
        )

    await registration_service.register(username=config.username, password=config.password)
    return BootstrapResult(outcome=BootstrapOutcome.CREATED, username=config.username)
