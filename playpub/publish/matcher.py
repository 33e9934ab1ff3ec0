"""Resolve Ant-style include/exclude patterns against a directory tree."""

from __future__ import annotations

from pathlib import Path, PurePath, PurePosixPath

from playpub.core.result import Err, Ok, Result
from playpub.publish.errors import ConfigError

__all__ = ["find_files", "split_patterns"]


def split_patterns(pattern: str | None) -> list[str]:
    """Split a comma-separated pattern list, dropping blank entries."""
    if pattern is None:
        return []
    return [p.strip() for p in pattern.split(",") if p.strip()]


def _to_glob(pattern: str) -> str:
    # Ant: a trailing slash means everything below that directory.
    normalized = pattern.replace("\\", "/")
    if normalized.endswith("/"):
        return normalized + "**/*"
    # pathlib's trailing "**" yields directories only.
    if normalized == "**" or normalized.endswith("/**"):
        return normalized + "/*"
    return normalized


def _glob_files(root: Path, pattern: str) -> list[str]:
    found: list[str] = []
    for p in sorted(root.glob(_to_glob(pattern))):
        if p.is_file():
            found.append(p.relative_to(root).as_posix())
    return found


def find_files(
    root: Path,
    include: str | None,
    exclude: str | None = None,
) -> Result[list[str], ConfigError]:
    """Return files under ``root`` matching ``include`` but not ``exclude``.

    Paths are relative to ``root`` (POSIX separators), in discovery order:
    include patterns are applied left to right, matches of each pattern are
    sorted, and a file matched by several patterns is listed once.

    An empty result is not an error here; the caller decides.
    """
    includes = split_patterns(include)
    if not includes:
        return Err(ConfigError(("File pattern was not specified",)))

    excludes = split_patterns(exclude)
    for p in (*includes, *excludes):
        posix = PurePosixPath(p.replace("\\", "/"))
        if PurePath(p).is_absolute() or posix.is_absolute() or ".." in posix.parts:
            return Err(ConfigError((f"Pattern must stay inside the working directory: {p}",)))

    excluded: set[str] = set()
    for p in excludes:
        excluded.update(_glob_files(root, p))

    seen: set[str] = set()
    out: list[str] = []
    for p in includes:
        for rel in _glob_files(root, p):
            if rel in excluded or rel in seen:
                continue
            seen.add(rel)
            out.append(rel)
    return Ok(out)
