"""Site-wide settings and the data files loaded for templates."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from .files import FilesBuilder, read_file

_log = logging.getLogger(__name__)

_CONFIG_KEYS = frozenset(
    {"title", "description", "base_url", "sitemap", "data", "data_dir"}
)
_DEFAULT_DATA_DIR = "_data"


@dataclass
class Site:
    """Site settings exposed to templates as ``site``."""

    title: str | None = None
    description: str | None = None
    base_url: str | None = None
    sitemap: str | None = None
    data: dict[str, Any] | None = None
    data_dir: str = _DEFAULT_DATA_DIR
    time: datetime = field(default_factory=lambda: datetime.now().astimezone())
    """The time at which the site was built."""

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Site:
        """Build from a mapping of optional site settings."""
        unknown = set(config) - _CONFIG_KEYS
        if unknown:
            raise ValueError(f"Unknown site fields: {', '.join(sorted(unknown))}")
        base_url = config.get("base_url")
        if base_url is not None:
            base_url = str(base_url)
            if base_url.endswith("/"):
                base_url = base_url[:-1]
        data = config.get("data")
        data_dir = config.get("data_dir")
        return cls(
            title=config.get("title"),
            description=config.get("description"),
            base_url=base_url,
            sitemap=config.get("sitemap"),
            data=None if data is None else dict(data),
            data_dir=_DEFAULT_DATA_DIR if data_dir is None else str(data_dir),
        )

    def load(self, source: str | os.PathLike) -> dict[str, Any]:
        """Attributes for templates, including data files under ``source``."""
        attributes: dict[str, Any] = {}
        if self.title is not None:
            attributes["title"] = self.title
        if self.description is not None:
            attributes["description"] = self.description
        if self.base_url is not None:
            attributes["base_url"] = self.base_url
        attributes["time"] = self.time

        data = dict(self.data or {})
        _insert_data_dir(data, Path(source) / self.data_dir)
        if data:
            attributes["data"] = data
        return attributes


def _deep_insert(
    data_map: dict[str, Any], file_path: Path, target_key: str, data: Any
) -> None:
    target = data_map
    for key in file_path.parent.parts:
        target = target.setdefault(key, {})
        if not isinstance(target, dict):
            raise ValueError(
                f"Aborting: Duplicate in data tree. Would overwrite {file_path.parent}"
            )
    if target_key in target:
        raise ValueError(
            f"The data from {file_path} can't be loaded: the key already exists"
        )
    target[target_key] = data


def _load_data(data_path: Path) -> Any:
    ext = data_path.suffix[1:]
    if ext in ("yml", "yaml"):
        with open(data_path, encoding="utf-8") as reader:
            return yaml.safe_load(reader)
    if ext == "json":
        with open(data_path, encoding="utf-8") as reader:
            return json.load(reader)
    if ext == "toml":
        return tomllib.loads(read_file(data_path))
    raise ValueError(
        f"Failed to load of data `{data_path}`: unknown file type '{ext}'.\n"
        "Supported data files extensions are: yml, yaml, json and toml."
    )


def _insert_data_dir(data: dict[str, Any], data_root: Path) -> None:
    _log.debug("Loading data from `%s`", data_root)
    for full_path in FilesBuilder(data_root).build().files():
        rel_path = full_path.relative_to(data_root)
        try:
            fragment = _load_data(full_path)
        except (OSError, ValueError, yaml.YAMLError) as err:
            raise ValueError(f"Loading data from `{full_path}` failed: {err}") from err
        try:
            _deep_insert(data, rel_path, full_path.stem, fragment)
        except ValueError as err:
            raise ValueError(f"Merging data into `{rel_path}` failed: {err}") from err