"""Expansion of permalink templates and mapping of URLs onto output files."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

_EXPRESSION = re.compile(r"\{\{-?\s*(.*?)\s*-?\}\}", re.S)
_VARIABLE = re.compile(r"[A-Za-z_][\w-]*(?:\.[A-Za-z_][\w-]*)*\Z")


def _lookup(attributes: Mapping[str, Any], name: str) -> Any:
    value: Any = attributes
    for key in name.split("."):
        if not isinstance(value, Mapping) or key not in value:
            raise ValueError(f"Unknown variable `{name}` in permalink")
        value = value[key]
    return value


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S %z")
    if isinstance(value, (list, tuple)):
        return "".join(_render_value(item) for item in value)
    return str(value)


def _render(template: str, attributes: Mapping[str, Any]) -> str:
    if "{%" in template:
        raise ValueError(f"Tags are not supported in permalink `{template}`")
    pieces = []
    position = 0
    for match in _EXPRESSION.finditer(template):
        pieces.append(template[position : match.start()])
        expression = match.group(1)
        if not _VARIABLE.match(expression):
            raise ValueError(
                f"Invalid expression `{expression}` in permalink `{template}`"
            )
        pieces.append(_render_value(_lookup(attributes, expression)))
        position = match.end()
    rest = template[position:]
    if "{{" in rest:
        raise ValueError(f"Unclosed expression in permalink `{template}`")
    pieces.append(rest)
    return "".join(pieces)


def explode_permalink(permalink: str, attributes: Mapping[str, Any]) -> str:
    """Substitute ``attributes`` into ``permalink`` and clean up the result."""
    rendered = _render(str(permalink), attributes)
    # Windows-style separators written by the user.
    rendered = rendered.replace("\\", "/")
    # Blank substitutions leave doubled separators behind.
    rendered = rendered.replace("//", "/")
    if rendered.startswith("/"):
        rendered = rendered[1:]
    return rendered


def _has_extension(name: str) -> bool:
    if name in ("", ".", ".."):
        return False
    return name.rfind(".") > 0


def format_url_as_file(permalink: str) -> str:
    """Turn a URL path into a relative output file path.

    A URL without an extension becomes a directory holding ``index.html``.
    """
    parts = [part for part in str(permalink).split("/") if part and part != "."]
    if not parts or not _has_extension(parts[-1]):
        parts.append("index.html")
    return "/".join(parts)