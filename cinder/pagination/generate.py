"""Entry point building the paginators of a paginated document."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..document import Document
from ..model.pagination_config import Include
from .categories import create_categories_paginators
from .core import sort_posts
from .dates import create_dates_paginators
from .paginator import Paginator, create_all_paginators
from .tags import create_tags_paginators


def generate_paginators(doc: Document, posts_data: Iterable[Any]) -> list[Paginator]:
    """Paginators of ``doc`` over ``posts_data``, grouped as its config asks."""
    config = doc.front.pagination
    if config is None:
        raise ValueError("Front should have pagination here.")
    all_posts = list(posts_data)
    if config.include is Include.ALL:
        sort_posts(all_posts, config)
        return create_all_paginators(all_posts, doc, config, None)
    if config.include is Include.TAGS:
        return create_tags_paginators(all_posts, doc, config)
    if config.include is Include.CATEGORIES:
        return create_categories_paginators(all_posts, doc, config)
    if config.include is Include.DATES:
        return create_dates_paginators(all_posts, doc, config)
    raise ValueError("Pagination includes nothing")