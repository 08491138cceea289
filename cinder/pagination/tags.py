"""Paginators grouping posts by tag."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from ..document import Document
from ..model.pagination_config import PaginationConfig
from ..model.slug import slugify
from .core import sort_posts
from .helpers import extract_tags
from .paginator import Paginator, create_all_paginators


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S %z")
    return str(value)


def _distribute_posts_by_tags(all_posts: Sequence[Any]) -> dict[str, list[Any]]:
    per_tags: dict[str, list[Any]] = {}
    for post in all_posts:
        tags = extract_tags(post)
        if tags is None:
            continue
        for tag in tags:
            if tag is None or isinstance(tag, (dict, list, tuple)):
                raise ValueError("Should have string tags")
            per_tags.setdefault(_scalar_text(tag), []).append(post)
    return per_tags


def create_tags_paginators(
    all_posts: Sequence[Any], doc: Document, pagination_cfg: PaginationConfig
) -> list[Paginator]:
    """A root paginator listing every tag, followed by each tag's paginators."""
    firsts_of_tags: list[Paginator] = []
    paginators: list[Paginator] = []
    for tag, posts in _distribute_posts_by_tags(all_posts).items():
        sort_posts(posts, pagination_cfg)
        tag_paginators = create_all_paginators(posts, doc, pagination_cfg, tag)
        firsts_of_tags.append(tag_paginators[0])
        paginators.extend(tag_paginators)

    firsts_of_tags.sort(
        key=lambda p: (
            p.index_title is not None,
            "" if p.index_title is None else slugify(_scalar_text(p.index_title)).lower(),
        )
    )
    return [Paginator(indexes=firsts_of_tags), *paginators]