"""Documents of a site: their output location, attributes and feed metadata."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from email.utils import format_datetime
from pathlib import PurePosixPath
from typing import Any

from .model.frontmatter import Frontmatter, SourceFormat
from .model.permalink import explode_permalink, format_url_as_file
from .model.slug import slugify

_MARKDOWN_REF = re.compile(r"^ {0,3}\[[^\]]+\]:.+$", re.M)


def _parent(path: str) -> str:
    path = str(path)
    return path.rsplit("/", 1)[0] if "/" in path else ""


def _stem(path: str) -> str:
    name = str(path).rsplit("/", 1)[-1]
    return PurePosixPath(name).stem if name else ""


def permalink_attributes(front: Frontmatter, dest_file: str) -> dict[str, Any]:
    """Variables available when expanding a document's permalink."""
    attributes: dict[str, Any] = {
        "parent": _parent(dest_file),
        "name": _stem(dest_file),
        "ext": ".html",
        "slug": front.slug,
        "categories": "/".join(slugify(category) for category in front.categories),
    }
    date = front.published_date
    if date is not None:
        attributes.update(
            year=str(date.year),
            month=f"{date.month:02}",
            i_month=str(date.month),
            day=f"{date.day:02}",
            i_day=str(date.day),
            hour=f"{date.hour:02}",
            minute=f"{date.minute:02}",
            second=f"{date.second:02}",
        )
    attributes["data"] = dict(front.data)
    return attributes


def document_attributes(
    front: Frontmatter, source_file: str, url_path: str
) -> dict[str, Any]:
    """Attributes a document exposes to templates as ``page``."""
    source_file = str(source_file)
    attributes: dict[str, Any] = {
        "permalink": url_path,
        "title": front.title,
        "slug": front.slug,
        "description": front.description or "",
        "categories": list(front.categories),
        "tags": list(front.tags),
        "is_draft": front.is_draft,
        "weight": front.weight,
        # Lets templates reach assets next to the source and link back to it.
        "file": {"permalink": source_file, "parent": _parent(source_file)},
        "collection": front.collection,
        "data": dict(front.data),
    }
    if front.published_date is not None:
        attributes["published_date"] = front.published_date
    return attributes


def _first_part(content: str, separator: str) -> str:
    if not separator:
        return ""
    return content.split(separator, 1)[0]


def extract_excerpt(content: str, format: SourceFormat, excerpt_separator: str) -> str:
    """The part of ``content`` before the separator.

    Markdown excerpts keep every link reference definition of the document so
    that reference-style links inside the excerpt still resolve.
    """
    head = _first_part(content, excerpt_separator)
    if format is SourceFormat.MARKDOWN:
        trail = "".join(f"{match.group(0)}\n" for match in _MARKDOWN_REF.finditer(content))
        return trail + head
    return head


@dataclass
class Document:
    """A source document with its resolved front matter and output location."""

    url_path: str
    file_path: str
    content: str
    front: Frontmatter
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, content: str, rel_path: str, front: Frontmatter) -> Document:
        """Place ``content`` found at ``rel_path`` according to ``front``."""
        rel_path = str(rel_path)
        perma_attributes = permalink_attributes(front, rel_path)
        try:
            url_path = explode_permalink(front.permalink, perma_attributes)
        except ValueError as err:
            raise ValueError(f"Failed to create permalink `{front.permalink}`") from err
        file_path = format_url_as_file(url_path)
        attributes = document_attributes(front, rel_path, url_path)
        return cls(
            url_path=url_path,
            file_path=file_path,
            content=content,
            front=front,
            attributes=attributes,
        )

    def description_to_str(self) -> str | None:
        """Description, else the rendered excerpt, else the rendered content."""
        if self.front.description is not None:
            return str(self.front.description)
        excerpt = self.attributes.get("excerpt")
        if excerpt is not None:
            return _render(excerpt)
        if "content" in self.attributes:
            return _render(self.attributes["content"])
        return None

    def to_jsonfeed(self, root_url: str) -> dict[str, Any]:
        """Metadata of this document as a JSON Feed item."""
        link = f"{root_url}/{self.url_path}"
        tags = self.front.tags if self.front.tags else self.front.categories
        item: dict[str, Any] = {
            "id": link,
            "url": link,
            "title": self.front.title,
            "content_html": self.description_to_str() or "",
            "tags": list(tags),
        }
        if self.front.published_date is not None:
            item["date_published"] = format_datetime(self.front.published_date)
        return item


def _render(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        return str(dict(value))
    if isinstance(value, (list, tuple)):
        return "".join(_render(item) for item in value)
    return str(value)