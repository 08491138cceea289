"""Resolved front matter of a document."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import yaml

from .pagination_config import PaginationConfig, _parse_enum, is_date_index_sorted

DEFAULT_PERMALINK = "/{{parent}}/{{name}}{{ext}}"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

_CONFIG_KEYS = frozenset(
    {
        "permalink",
        "slug",
        "title",
        "description",
        "excerpt",
        "categories",
        "tags",
        "excerpt_separator",
        "published_date",
        "format",
        "templated",
        "layout",
        "is_draft",
        "weight",
        "collection",
        "data",
        "pagination",
    }
)


class SourceFormat(enum.Enum):
    """How a document's body is turned into HTML."""

    RAW = "Raw"
    MARKDOWN = "Markdown"


def _parse_date(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    text = str(value).strip()
    try:
        return datetime.strptime(text, _DATE_FORMAT)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text)
    except ValueError as err:
        raise ValueError(f"Invalid published_date `{text}`") from err


@dataclass
class Frontmatter:
    """Front matter with every default applied."""

    permalink: str = DEFAULT_PERMALINK
    slug: str = ""
    title: str = ""
    description: str | None = None
    excerpt: str | None = None
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    excerpt_separator: str = ""
    published_date: datetime | None = None
    format: SourceFormat = SourceFormat.RAW
    templated: bool = False
    layout: str | None = None
    is_draft: bool = False
    weight: int = 0
    collection: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    pagination: PaginationConfig | None = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Frontmatter:
        """Build from a mapping of optional front matter fields."""
        unknown = set(config) - _CONFIG_KEYS
        if unknown:
            raise ValueError(f"Unknown frontmatter fields: {', '.join(sorted(unknown))}")
        get = config.get

        permalink = get("permalink")
        permalink = DEFAULT_PERMALINK if permalink is None else str(permalink)

        tags = get("tags")
        if tags is not None and any(not str(tag).strip() for tag in tags):
            raise ValueError("Empty strings are not allowed in tags")

        pagination_config = get("pagination")
        pagination = (
            None
            if pagination_config is None
            else PaginationConfig.from_config(pagination_config, permalink)
        )

        slug = get("slug")
        if slug is None:
            raise ValueError("No slug")
        title = get("title")
        if title is None:
            raise ValueError("No title")

        def optional(key: str, default: Any) -> Any:
            value = get(key)
            return default if value is None else value

        front = cls(
            permalink=permalink,
            slug=str(slug),
            title=str(title),
            description=get("description"),
            excerpt=get("excerpt"),
            categories=[str(c) for c in optional("categories", [])],
            tags=[str(t) for t in optional("tags", [])],
            excerpt_separator=str(optional("excerpt_separator", "\n\n")),
            published_date=_parse_date(get("published_date")),
            format=_parse_enum(SourceFormat, optional("format", SourceFormat.RAW)),
            templated=bool(optional("templated", True)),
            layout=get("layout"),
            is_draft=bool(optional("is_draft", False)),
            weight=int(optional("weight", 0)),
            collection=str(optional("collection", "")),
            data=dict(optional("data", {})),
            pagination=pagination,
        )

        if front.pagination is not None and not is_date_index_sorted(
            front.pagination.date_index
        ):
            raise ValueError("date_index is not correctly sorted: Year > Month > Day...")
        return front

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form of every field."""
        return {
            "permalink": self.permalink,
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "excerpt": self.excerpt,
            "categories": list(self.categories),
            "tags": list(self.tags),
            "excerpt_separator": self.excerpt_separator,
            "published_date": (
                None
                if self.published_date is None
                else self.published_date.strftime(_DATE_FORMAT)
            ),
            "format": self.format.value,
            "templated": self.templated,
            "layout": self.layout,
            "is_draft": self.is_draft,
            "weight": self.weight,
            "collection": self.collection,
            "data": self.data,
            "pagination": None if self.pagination is None else self.pagination.to_dict(),
        }

    def __str__(self) -> str:
        converted = yaml.safe_dump(
            self.to_dict(), sort_keys=False, allow_unicode=True, default_flow_style=False
        )
        subset = converted.removeprefix("---").strip()
        return "" if subset == "{}" else subset