"""Process logging configuration for the web runtime."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Map a level name to its numeric value, falling back to INFO."""

    normalized = level.strip().upper()
    resolved = logging.getLevelName(normalized) if normalized else logging.INFO
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str) -> None:
    """Configure root logging once with the shared line format."""

    logging.basicConfig(
        level=resolve_log_level(level),
        format=_LOG_FORMAT,
    )
