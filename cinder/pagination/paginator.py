"""Paginators: one numbered index page listing a chunk of posts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..document import Document
from ..model.pagination_config import PaginationConfig
from .core import interpret_permalink


@dataclass
class Paginator:
    """One index page: its posts, its neighbours and the sub-indexes it lists."""

    total_indexes: int = 0
    total_pages: int = 0
    pages: list[Any] | None = None
    indexes: list[Paginator] | None = None
    index: int = 0
    index_title: Any = None
    index_permalink: str = ""
    previous_index: int = 0
    previous_index_permalink: str | None = None
    next_index: int = 0
    next_index_permalink: str | None = None
    first_index_permalink: str = ""
    last_index_permalink: str = ""

    def set_first_last(
        self,
        doc: Document,
        config: PaginationConfig,
        total_pages: int,
        index_title: Any,
    ) -> None:
        self.first_index_permalink = doc.url_path
        self.last_index_permalink = interpret_permalink(
            config, doc, total_pages, index_title
        )

    def set_current_index_info(
        self,
        index: int,
        all_pages: Sequence[Any],
        config: PaginationConfig,
        doc: Document,
        index_title: Any,
    ) -> None:
        self.index = index
        self.pages = list(all_pages)
        self.index_title = index_title
        self.index_permalink = interpret_permalink(config, doc, index, index_title)

    def set_previous_next_info(
        self,
        index: int,
        total_indexes: int,
        doc: Document,
        config: PaginationConfig,
        index_title: Any,
    ) -> None:
        if index > 1:
            self.previous_index_permalink = interpret_permalink(
                config, doc, index - 1, index_title
            )
            self.previous_index = index - 1
        if index < total_indexes:
            self.next_index = index + 1
            self.next_index_permalink = interpret_permalink(
                config, doc, index + 1, index_title
            )

    def to_object(self) -> dict[str, Any]:
        """Template-facing form of this paginator."""
        obj: dict[str, Any] = {}
        # Without pages the paginator lists indexes instead (tags and the like).
        if self.pages is not None:
            obj["pages"] = list(self.pages)
        if self.indexes is not None:
            obj["indexes"] = [paginator.to_object() for paginator in self.indexes]
        obj["index"] = self.index
        obj["index_permalink"] = self.index_permalink
        if self.index_title is not None:
            obj["index_title"] = self.index_title
        if self.previous_index_permalink is not None:
            obj["previous_index"] = self.previous_index
            obj["previous_index_permalink"] = self.previous_index_permalink
        if self.next_index_permalink is not None:
            obj["next_index"] = self.next_index
            obj["next_index_permalink"] = self.next_index_permalink
        obj["first_index_permalink"] = self.first_index_permalink
        obj["last_index_permalink"] = self.last_index_permalink
        obj["total_indexes"] = self.total_indexes
        obj["total_pages"] = self.total_pages
        return obj


def create_paginator(
    i: int,
    total_indexes: int,
    total_pages: int,
    config: PaginationConfig,
    doc: Document,
    all_posts: Sequence[Any],
    index_title: Any,
) -> Paginator:
    """The paginator of the ``i``-th chunk (counted from zero)."""
    index = i + 1
    paginator = Paginator(total_indexes=total_indexes, total_pages=total_pages)
    paginator.set_first_last(doc, config, total_indexes, index_title)
    paginator.set_current_index_info(index, all_posts, config, doc, index_title)
    paginator.set_previous_next_info(index, total_indexes, doc, config, index_title)
    return paginator


def create_all_paginators(
    all_posts: Sequence[Any],
    doc: Document,
    pagination_cfg: PaginationConfig,
    index_title: Any = None,
) -> list[Paginator]:
    """Split ``all_posts`` into pages of ``per_page`` posts each."""
    per_page = pagination_cfg.per_page
    if per_page <= 0:
        raise ValueError(f"per_page must be positive, got {per_page}")
    posts = list(all_posts)
    total_pages = len(posts)
    total_indexes = -(-total_pages // per_page)
    return [
        create_paginator(
            i,
            total_indexes,
            total_pages,
            pagination_cfg,
            doc,
            posts[start : start + per_page],
            index_title,
        )
        for i, start in enumerate(range(0, total_pages, per_page))
    ]