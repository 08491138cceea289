"""Lookups of post attributes used while paginating."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _extract_value(value: Any, key: str) -> Any:
    if not isinstance(value, Mapping):
        return None
    return value.get(key)


def _is_scalar(value: Any) -> bool:
    return value is not None and not isinstance(value, (Mapping, list, tuple))


def extract_scalar(value: Any, key: str) -> Any:
    """The scalar stored under ``key``, or ``None``."""
    found = _extract_value(value, key)
    return found if _is_scalar(found) else None


def _extract_array(value: Any, key: str) -> list | tuple | None:
    found = _extract_value(value, key)
    return found if isinstance(found, (list, tuple)) else None


def extract_tags(value: Any) -> list | tuple | None:
    """The post's ``tags`` array, or ``None``."""
    return _extract_array(value, "tags")


def extract_categories(value: Any) -> list | tuple | None:
    """The post's ``categories`` array, or ``None``."""
    return _extract_array(value, "categories")