"""Sorting of posts and permalinks of paginated index pages."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any

from ..document import Document, permalink_attributes
from ..model.pagination_config import Include, PaginationConfig, SortOrder
from ..model.permalink import explode_permalink
from ..model.slug import slugify
from .helpers import extract_scalar


def _partial_cmp(a: Any, b: Any) -> int:
    if isinstance(a, bool) != isinstance(b, bool):
        return 0
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        return 0
    return 0


def sort_posts(posts: list[Any], config: PaginationConfig) -> None:
    """Sort ``posts`` in place by each of ``config.sort_by`` in turn."""
    if config.order is SortOrder.DESC:
        order = lambda a, b: _partial_cmp(b, a)  # noqa: E731
    elif config.order is SortOrder.ASC:
        order = _partial_cmp
    else:
        raise ValueError("Sort order must be set when paginating")
    keys = list(config.sort_by)

    def compare(left: Any, right: Any) -> int:
        cmp = -1
        for key in keys:
            a = extract_scalar(left, key)
            b = extract_scalar(right, key)
            if a is not None and b is not None:
                cmp = order(a, b)
            elif a is None and b is None:
                cmp = 0
            elif b is None:
                cmp = 1
            else:
                cmp = -1
            if cmp != 0:
                return cmp
        return cmp

    posts.sort(key=functools.cmp_to_key(compare))


def pagination_attributes(page_num: int) -> dict[str, Any]:
    """Extra permalink variables of a numbered page."""
    return {"num": page_num}


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return str(dict(value))
    return str(value)


def index_to_string(index: Any) -> str:
    """Slug path of an index title; a list gives one segment per item."""
    if isinstance(index, (list, tuple)):
        return "/".join(slugify(_to_str(item)) for item in index)
    return slugify(_to_str(index))


def _extension(path: str) -> str | None:
    name = path.rstrip("/").rsplit("/", 1)[-1]
    if name in ("", ".", ".."):
        return None
    dot = name.rfind(".")
    return name[dot + 1 :] if dot > 0 else None


def interpret_permalink(
    config: PaginationConfig, doc: Document, page_num: int, index: Any = None
) -> str:
    """Permalink of page ``page_num`` of the index ``index``."""
    attributes = permalink_attributes(doc.front, doc.file_path)
    permalink = explode_permalink(config.front_permalink, attributes)
    ext = _extension(permalink)
    root = permalink
    if ext is not None:
        suffix = f".{ext}"
        while root.endswith(suffix):
            root = root[: -len(suffix)]

    if page_num == 1:
        if index is None:
            return doc.url_path
        index_path = index_to_string(index)
        return index_path if not root else f"{root}/{index_path}"

    attributes.update(pagination_attributes(page_num))
    if index is not None:
        index_path = index_to_string(index)
    elif config.include is Include.ALL:
        index_path = "all"
    else:
        raise ValueError("Include is not All and no index")
    suffix_path = explode_permalink(config.permalink_suffix, attributes)
    if not root:
        return f"{index_path}/{suffix_path}"
    return f"{root}/{index_path}/{suffix_path}"