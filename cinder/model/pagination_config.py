"""Pagination settings taken from a page's front matter."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar


class Include(enum.Enum):
    """Which grouping of posts a paginated page lists."""

    NONE = "None"
    ALL = "All"
    TAGS = "Tags"
    CATEGORIES = "Categories"
    DATES = "Dates"


class SortOrder(enum.Enum):
    """Direction in which posts are sorted."""

    NONE = "None"
    ASC = "Asc"
    DESC = "Desc"


class DateIndex(enum.IntEnum):
    """Date fields posts can be indexed by, from coarsest to finest."""

    YEAR = 1
    MONTH = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5


_E = TypeVar("_E", bound=enum.Enum)


def _parse_enum(kind: type[_E], value: Any) -> _E:
    if isinstance(value, kind):
        return value
    if isinstance(value, str):
        for member in kind:
            if member.name.lower() == value.lower():
                return member
    choices = ", ".join(member.name.title() for member in kind)
    raise ValueError(f"Invalid {kind.__name__} `{value}`; expected one of: {choices}")


_DEFAULT_PER_PAGE = 10
_DEFAULT_PERMALINK_SUFFIX = "./{{num}}/"
_DEFAULT_ORDER = SortOrder.DESC
_DEFAULT_SORT_BY = ("weight", "published_date")
_DEFAULT_DATE_INDEX = (DateIndex.YEAR, DateIndex.MONTH)
_CONFIG_KEYS = frozenset(
    {"include", "per_page", "permalink_suffix", "order", "sort_by", "date_index"}
)


@dataclass
class PaginationConfig:
    """Complete pagination settings with every default applied."""

    include: Include = Include.ALL
    per_page: int = _DEFAULT_PER_PAGE
    front_permalink: str = ""
    permalink_suffix: str = _DEFAULT_PERMALINK_SUFFIX
    order: SortOrder = _DEFAULT_ORDER
    sort_by: list[str] = field(default_factory=lambda: list(_DEFAULT_SORT_BY))
    date_index: list[DateIndex] = field(
        default_factory=lambda: list(_DEFAULT_DATE_INDEX)
    )

    @classmethod
    def from_config(
        cls, config: Mapping[str, Any], permalink: str
    ) -> PaginationConfig | None:
        """Apply defaults to ``config``; ``None`` when nothing is included."""
        unknown = set(config) - _CONFIG_KEYS
        if unknown:
            raise ValueError(f"Unknown pagination fields: {', '.join(sorted(unknown))}")

        def pick(key: str, default: Any) -> Any:
            value = config.get(key)
            return default if value is None else value

        include = _parse_enum(Include, pick("include", Include.NONE))
        if include is Include.NONE:
            return None
        return cls(
            include=include,
            per_page=int(pick("per_page", _DEFAULT_PER_PAGE)),
            front_permalink=str(permalink),
            permalink_suffix=str(pick("permalink_suffix", _DEFAULT_PERMALINK_SUFFIX)),
            order=_parse_enum(SortOrder, pick("order", _DEFAULT_ORDER)),
            sort_by=[str(key) for key in pick("sort_by", _DEFAULT_SORT_BY)],
            date_index=[
                _parse_enum(DateIndex, item)
                for item in pick("date_index", _DEFAULT_DATE_INDEX)
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form, as written out in front matter."""
        return {
            "include": self.include.value,
            "per_page": self.per_page,
            "front_permalink": self.front_permalink,
            "permalink_suffix": self.permalink_suffix,
            "order": self.order.value,
            "sort_by": list(self.sort_by),
            "date_index": [index.name.title() for index in self.date_index],
        }


def is_date_index_sorted(v: Iterable[DateIndex]) -> bool:
    """Whether the date fields run from coarsest to finest."""
    items = list(v)
    return items == sorted(items)