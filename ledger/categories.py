"""Fixed registry of expense categories."""

from __future__ import annotations

from typing import Tuple

__all__ = ["CATEGORIES", "is_registered_category"]

CATEGORIES: Tuple[str, ...] = (
    "Food",
    "Travel",
    "Entertainment",
    "Utilities",
    "Health",
    "Education",
)


def is_registered_category(value: object) -> bool:
    """Exact, case-sensitive membership test against the registry."""
    return isinstance(value, str) and value in CATEGORIES
