"""Shared template context for server-rendered pages."""

from __future__ import annotations

from typing import Any

_NAV_ITEMS = (
    ("home", "Home", "/"),
    ("register", "Register", "/register"),
    ("login", "Log in", "/login"),
)


def build_shell_context(*, page_title: str, active_nav: str) -> dict[str, Any]:
    """Return page title and navigation entries used by the base layout."""

    return {
        "page_title": page_title,
        "nav_items": [
            {"key": key, "label": label, "href": href, "active": key == active_nav}
            for key, label, href in _NAV_ITEMS
        ],
    }
