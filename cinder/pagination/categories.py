"""Paginators grouping posts by their category hierarchy."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..document import Document
from ..model.pagination_config import PaginationConfig
from .core import sort_posts
from .helpers import extract_categories
from .paginator import Paginator, create_all_paginators


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S %z")
    if value is None:
        return ""
    return str(value)


@dataclass
class _Category:
    cat_path: list[Any] = field(default_factory=list)
    posts: list[Any] = field(default_factory=list)
    sub_cats: dict[str, _Category] = field(default_factory=dict)


def _distribute_posts_by_categories(all_posts: Sequence[Any]) -> _Category:
    root = _Category()
    for post in all_posts:
        categories = extract_categories(post)
        if categories is None:
            continue
        parent = root
        for depth, category in enumerate(categories):
            name = _scalar_text(category)
            if name not in parent.sub_cats:
                parent.sub_cats[name] = _Category(cat_path=list(categories[: depth + 1]))
            parent = parent.sub_cats[name]
        parent.posts.append(post)
    return root


def _walk_categories(
    category: _Category, config: PaginationConfig, doc: Document
) -> list[Paginator]:
    holder: list[Paginator] = []
    if category.cat_path:
        sort_posts(category.posts, config)
        title = list(category.cat_path)
        paginators = create_all_paginators(category.posts, doc, config, title)
        holder.extend(paginators or [Paginator(index_title=title)])
    else:
        holder.append(Paginator())
    for name in sorted(category.sub_cats):
        sub = _walk_categories(category.sub_cats[name], config, doc)
        if holder[0].indexes is None:
            holder[0].indexes = []
        holder[0].indexes.append(sub[0])
        holder.extend(sub)
    return holder


def create_categories_paginators(
    all_posts: Sequence[Any], doc: Document, pagination_cfg: PaginationConfig
) -> list[Paginator]:
    """Paginators of every category, depth first, behind a root paginator."""
    root = _distribute_posts_by_categories(all_posts)
    return _walk_categories(root, pagination_cfg, doc)