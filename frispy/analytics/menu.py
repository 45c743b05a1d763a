"""Menu browsing helpers used by the register."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import MenuItem


def menu_categories(items: Iterable[MenuItem]) -> list[str]:
    """Return the distinct menu categories, sorted."""
    return sorted({item.category for item in items})


def search_menu(items: Iterable[MenuItem], query: str) -> list[MenuItem]:
    """Case-insensitive substring search on item names."""
    needle = query.lower()
    return [item for item in items if needle in item.name.lower()]
