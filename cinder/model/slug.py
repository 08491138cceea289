"""Slug creation and slug-to-title formatting."""

from __future__ import annotations

import re

from unidecode import unidecode

_SLUG_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9]+")


def slugify(name: str) -> str:
    """Create a URL slug for ``name``, matching Jekyll's ``:slug`` path tag."""
    ascii_name = unidecode(name, errors="replace", replace_str="-")
    slug = _SLUG_INVALID_CHARS.sub("-", ascii_name)
    return slug.strip("-").lower()


def _title_case(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def titleize_slug(slug: str) -> str:
    """Format a user-visible title out of a slug."""
    return " ".join(_title_case(word) for word in slug.split("-"))