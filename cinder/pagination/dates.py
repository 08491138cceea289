"""Paginators grouping posts by the fields of their publication date."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from ..document import Document
from ..model.pagination_config import DateIndex, PaginationConfig
from .core import sort_posts
from .helpers import extract_scalar
from .paginator import Paginator, create_all_paginators

_DATE_FORMATS = ("%Y-%m-%d %H:%M:%S %z", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d")


@dataclass
class _DateIndexHolder:
    value: int
    field: DateIndex | None
    posts: list[Any] = field(default_factory=list)
    sub_date: list[_DateIndexHolder] = field(default_factory=list)


def _to_date_time(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if not isinstance(value, str):
        return None
    text = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _extract_published_date(post: Any) -> datetime | None:
    published_date = extract_scalar(post, "published_date")
    return None if published_date is None else _to_date_time(published_date)


def _date_field_value(when: datetime, field_: DateIndex) -> int:
    return {
        DateIndex.YEAR: when.year,
        DateIndex.MONTH: when.month,
        DateIndex.DAY: when.day,
        DateIndex.HOUR: when.hour,
        DateIndex.MINUTE: when.minute,
    }[field_]


def _format_date_holder(holder: _DateIndexHolder) -> str:
    if holder.field is None:
        raise ValueError("The root date holder has no field to format")
    if holder.field is DateIndex.YEAR:
        return str(holder.value)
    return f"{holder.value:02}"


def _find_or_create_and_put(
    holder: _DateIndexHolder, when: datetime, wanted: DateIndex, post: Any
) -> None:
    value = _date_field_value(when, wanted)
    not_found = True
    for sub in holder.sub_date:
        if sub.field < wanted:
            # The parent level was created by an earlier, coarser field.
            if sub.value == _date_field_value(when, sub.field):
                _find_or_create_and_put(sub, when, wanted, post)
                not_found = False
        elif sub.field == wanted and sub.value == value:
            sub.posts.append(post)
            not_found = False
    if not_found:
        holder.sub_date.append(_DateIndexHolder(value, wanted, [post]))


def _distribute_posts_by_dates(
    all_posts: Sequence[Any], config: PaginationConfig
) -> _DateIndexHolder:
    root = _DateIndexHolder(0, None)
    for post in all_posts:
        when = _extract_published_date(post)
        if when is None:
            continue
        for index in config.date_index:
            _find_or_create_and_put(root, when, index, post)
    return root


def _walk_dates(
    holder: _DateIndexHolder,
    config: PaginationConfig,
    doc: Document,
    parent_dates: list[_DateIndexHolder] | None,
) -> list[Paginator]:
    result: list[Paginator] = []
    current = list(parent_dates or [])
    if holder.field is not None:
        sort_posts(holder.posts, config)
        current.append(holder)
        title = [_format_date_holder(d) for d in current]
        paginators = create_all_paginators(holder.posts, doc, config, title)
        result.extend(paginators or [Paginator(index_title=title)])
    else:
        result.append(Paginator())
    for sub in holder.sub_date:
        sub_paginators = _walk_dates(sub, config, doc, current)
        if result[0].indexes is None:
            result[0].indexes = []
        result[0].indexes.append(sub_paginators[0])
        result.extend(sub_paginators)
    return result


def create_dates_paginators(
    all_posts: Sequence[Any], doc: Document, pagination_cfg: PaginationConfig
) -> list[Paginator]:
    """Paginators per year, month and so on, behind a root paginator."""
    root = _distribute_posts_by_dates(all_posts, pagination_cfg)
    return _walk_dates(root, pagination_cfg, doc, None)