"""Discovery of site files under a root, filtered by gitignore-style patterns."""

from __future__ import annotations

import logging
import os
import re
import shutil
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

_log = logging.getLogger(__name__)

StrPath = str | os.PathLike


# --- path helpers working on the path text as given -------------------------


def _components(path: str) -> tuple[str, ...]:
    rest = tuple(part for part in path.split("/") if part and part != ".")
    if path.startswith("/"):
        return ("/", *rest)
    if path == "." or path.startswith("./"):
        return (".", *rest)
    return rest


def _starts_with(path: str, prefix: str) -> bool:
    prefix_parts = _components(prefix)
    return _components(path)[: len(prefix_parts)] == prefix_parts


def _same_path(left: str, right: str) -> bool:
    return _components(left) == _components(right)


def _parent(path: str) -> str | None:
    parts = _components(path)
    if not parts or parts == ("/",):
        return None
    stripped = path.rstrip("/")
    if "/" not in stripped:
        return ""
    head = stripped.rsplit("/", 1)[0].rstrip("/")
    return head or "/"


def _join(base: str, tail: str) -> str:
    if tail.startswith("/") or not base:
        return tail
    if base.endswith("/"):
        return base + tail
    return f"{base}/{tail}"


def _extension(path: str) -> str | None:
    name = path.rstrip("/").rsplit("/", 1)[-1]
    if name in ("", ".", ".."):
        return None
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1 :]


# --- gitignore-style matching ------------------------------------------------

_GLOB_PART = re.compile(r"\\(.)|(\*+)|(\?)|\[([!^])?(\]?[^\]]*)\]|(\[)|(\\)|(.)", re.S)


def _segment_to_regex(segment: str, glob: str) -> str:
    parts = []
    for match in _GLOB_PART.finditer(segment):
        escaped, stars, question, negation, body, open_bracket, backslash, literal = (
            match.groups()
        )
        if escaped is not None:
            parts.append(re.escape(escaped))
        elif stars is not None:
            parts.append("[^/]*")
        elif question is not None:
            parts.append("[^/]")
        elif body is not None:
            inner = "-".join(re.escape(piece) for piece in body.split("-"))
            parts.append(f"[{'^' if negation else ''}{inner}]")
        elif open_bracket is not None:
            raise ValueError(f"unclosed character class in glob {glob!r}")
        elif backslash is not None:
            raise ValueError(f"dangling escape in glob {glob!r}")
        else:
            parts.append(re.escape(literal))
    return "".join(parts)


def _glob_to_regex(glob: str) -> str:
    segments = glob.split("/")
    if segments == ["**"]:
        return ".*"
    last = len(segments) - 1
    parts = []
    for position, segment in enumerate(segments):
        if segment == "**":
            if position == 0:
                parts.append("(?:/?|.*/)")
            elif position == last:
                parts.append("/.*")
            else:
                parts.append("(?:/|/.*/)")
            continue
        if position > 0 and segments[position - 1] != "**":
            parts.append("/")
        parts.append(_segment_to_regex(segment, glob))
    return "".join(parts)


@dataclass(frozen=True)
class _Glob:
    original: str
    pattern: re.Pattern
    whitelist: bool
    only_dir: bool


def _parse_line(line: str) -> _Glob | None:
    if line.startswith("#"):
        return None
    if not line.endswith("\\ "):
        line = line.rstrip()
    if not line:
        return None
    original = line
    whitelist = False
    absolute = False
    only_dir = False
    if line.startswith(("\\!", "\\#")):
        line = line[1:]
        absolute = line.startswith("/")
    else:
        if line.startswith("!"):
            whitelist = True
            line = line[1:]
        if line.startswith("/"):
            line = line[1:]
            absolute = True
    if line.endswith("/"):
        only_dir = True
        line = line[:-1]
    actual = line
    if not absolute and "/" not in line and line != "**":
        actual = f"**/{actual}"
    if actual.endswith("/**"):
        actual = f"{actual}/*"
    return _Glob(original, re.compile(_glob_to_regex(actual), re.S), whitelist, only_dir)


class _Gitignore:
    def __init__(self, root: str, lines: Iterable[str]) -> None:
        self._root = root[2:] if root.startswith("./") else root
        self._globs = [glob for glob in map(_parse_line, lines) if glob is not None]

    def _strip(self, path: str) -> str:
        if path.startswith("./"):
            path = path[2:]
        if self._root != "." and "/" in path and path.startswith(self._root):
            path = path[len(self._root) :]
            if path.startswith("/"):
                path = path[1:]
        return path

    def matched(self, path: str, is_dir: bool) -> _Glob | None:
        candidate = self._strip(path)
        for glob in reversed(self._globs):
            if glob.only_dir and not is_dir:
                continue
            if glob.pattern.fullmatch(candidate):
                return glob
        return None


# --- public API --------------------------------------------------------------


class FilesBuilder:
    """Collects ignore patterns and extensions, then builds a :class:`Files`."""

    def __init__(self, root_dir: StrPath) -> None:
        self._root = os.fspath(root_dir)
        self._subtree: str | None = None
        self._ignore: list[str] = []
        self._ignore_hidden = True
        self._extensions: list[str] = []

    def add_ignore(self, line: str) -> FilesBuilder:
        _log.debug("%s: adding '%s' ignore pattern", self._root, line)
        self._ignore.append(line)
        return self

    def ignore_hidden(self, ignore: bool) -> FilesBuilder:
        self._ignore_hidden = ignore
        return self

    def limit(self, subtree: StrPath) -> FilesBuilder:
        self._subtree = os.fspath(subtree)
        return self

    def add_extension(self, ext: str) -> FilesBuilder:
        _log.debug("%s: adding '%s' extension", self._root, ext)
        self._extensions.append(ext)
        return self

    def build(self) -> Files:
        lines = [".*", "_*"] if self._ignore_hidden else []
        lines.extend(self._ignore)
        ignore = _Gitignore(self._root, lines)
        subtree = None if self._subtree is None else _join(self._root, self._subtree)
        return Files(self._root, subtree, ignore, tuple(self._extensions))


class Files:
    """A filtered view of the files beneath a root directory."""

    def __init__(
        self,
        root_dir: str,
        subtree: str | None,
        ignore: _Gitignore,
        extensions: tuple[str, ...],
    ) -> None:
        self._root = root_dir
        self._subtree = subtree
        self._ignore = ignore
        self._extensions = extensions

    def root(self) -> Path:
        return Path(self._root)

    def subtree(self) -> Path:
        return Path(self._subtree if self._subtree is not None else self._root)

    def includes_file(self, file: StrPath) -> bool:
        file = os.fspath(file)
        if not self._ext_contains(file):
            return False
        if self._subtree is not None and not _starts_with(file, self._subtree):
            return False
        return self._includes_path(file, False)

    def includes_dir(self, dir: StrPath) -> bool:
        dir = os.fspath(dir)
        if self._subtree is not None and not _starts_with(dir, self._subtree):
            return False
        return self._includes_path(dir, True)

    def files(self) -> Iterator[Path]:
        """Yield included files, walking directories in file-name order."""
        yield from self._walk(self._root)

    def __iter__(self) -> Iterator[Path]:
        return self.files()

    def _walk(self, directory: str) -> Iterator[Path]:
        try:
            with os.scandir(directory) as scan:
                entries = sorted(scan, key=lambda entry: os.fsencode(entry.name))
        except OSError:
            return
        for entry in entries:
            path = _join(directory, entry.name)
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError:
                continue
            if not self._includes_entry(path, is_dir):
                continue
            if is_dir:
                yield from self._walk(path)
            elif is_file:
                yield Path(path)

    def _ext_contains(self, file: str) -> bool:
        if not self._extensions:
            return True
        ext = _extension(file)
        return ext is not None and ext in self._extensions

    def _includes_entry(self, path: str, is_dir: bool) -> bool:
        if not is_dir and not self._ext_contains(path):
            return False
        if self._subtree is not None and not _starts_with(path, self._subtree):
            return False
        # Parents have already been checked on the way down.
        return self._includes_leaf(path, is_dir)

    def _includes_path(self, path: str, is_dir: bool) -> bool:
        if _same_path(path, self._root):
            return True
        parent = _parent(path)
        if parent is not None and _starts_with(parent, self._root):
            if _components(parent) == (".",):
                parent = "./"
            if not self._includes_path(parent, os.path.isdir(parent)):
                return False
        return self._includes_leaf(path, is_dir)

    def _includes_leaf(self, path: str, is_dir: bool) -> bool:
        glob = self._ignore.matched(path, is_dir)
        if glob is None:
            return True
        if glob.whitelist:
            _log.debug("%s: allowed %r", path, glob.original)
            return True
        _log.debug("%s: ignored %r", path, glob.original)
        return False


def find_project_file(dir: StrPath, name: str) -> Path | None:
    """Search ``dir`` and its ancestors for a file called ``name``."""
    current = Path(dir)
    while True:
        candidate = current / name
        if candidate.exists():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def cleanup_path(path: str) -> str:
    """Drop leading ``./`` segments; a bare ``.`` becomes empty."""
    while path.startswith("./"):
        path = path[2:]
    return "" if path == "." else path


def read_file(path: StrPath) -> str:
    """Read a UTF-8 text file with line endings normalised to ``\\n``."""
    with open(path, encoding="utf-8", newline=None) as handle:
        return handle.read()


def _ensure_parent(dest_file: Path) -> None:
    parent = dest_file.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise OSError(f"Could not create {parent}: {err}") from err


def copy_file(src_file: StrPath, dest_file: StrPath) -> None:
    """Copy a file, creating the destination's directories as needed."""
    src_file, dest_file = Path(src_file), Path(dest_file)
    _ensure_parent(dest_file)
    _log.debug("Copying `%s` to `%s`", src_file, dest_file)
    try:
        shutil.copy(src_file, dest_file)
    except OSError as err:
        raise OSError(f"Could not copy {src_file} into {dest_file}: {err}") from err


def write_document_file(content: str, dest_file: StrPath) -> None:
    """Write ``content`` as UTF-8, creating the destination's directories."""
    dest_file = Path(dest_file)
    _ensure_parent(dest_file)
    try:
        dest_file.write_bytes(content.encode("utf-8"))
    except OSError as err:
        raise OSError(f"Could not create {dest_file}: {err}") from err
    _log.debug("Wrote %s", dest_file)