"""Expansion (OBB) file naming and association.

Expansion files are named ``<slot>.<versionCode>.<applicationId>.<ext>``
where slot is ``main`` or ``patch`` (any case), for example
``main.100.com.example.app.obb``. The name is read with a small
recursive-descent parser rather than split on dots, since application ids
contain dots themselves:

    name     := slot "." version "." app_id "." ext
    slot     := "main" | "patch"
    version  := DIGIT+
    app_id   := segment ("." segment)*
    segment  := (LETTER | DIGIT | "_")+
    ext      := (LETTER | DIGIT)+
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Literal

from playpub.core.result import Err, Ok, Result
from playpub.publish.errors import CompletenessError, NamingConventionError
from playpub.publish.model import ApplicationGroup, ExpansionFileSet

__all__ = [
    "ExpansionSlot",
    "ExpansionFileName",
    "ExpansionFile",
    "parse_expansion_file_name",
    "parse_expansion_files",
    "select_expansion_files",
    "check_completeness",
]

ExpansionSlot = Literal["main", "patch"]


@dataclass(frozen=True, slots=True)
class ExpansionFileName:
    slot: ExpansionSlot
    version_code: int
    application_id: str
    extension: str


@dataclass(frozen=True, slots=True)
class ExpansionFile:
    """A discovered expansion file with its parsed name."""

    rel_path: str
    path: Path
    name: ExpansionFileName


class _NameParser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def take_while(self, pred: Callable[[str], bool]) -> str:
        start = self._pos
        while self._pos < len(self._text) and pred(self._text[self._pos]):
            self._pos += 1
        return self._text[start : self._pos]

    def expect(self, ch: str) -> bool:
        if self._text.startswith(ch, self._pos):
            self._pos += len(ch)
            return True
        return False


def _is_word(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_expansion_file_name(name: str) -> Result[ExpansionFileName, str]:
    """Parse a bare file name (no directory part)."""
    p = _NameParser(name)

    slot = p.take_while(_is_alnum).lower()
    if slot not in ("main", "patch"):
        return Err(f"unknown expansion slot '{slot}'")
    if not p.expect("."):
        return Err("expected '.' after slot")

    digits = p.take_while(_is_digit)
    if not digits:
        return Err("expected a numeric version code")
    if not p.expect("."):
        return Err("expected '.' after version code")

    segments: list[str] = []
    while True:
        segment = p.take_while(_is_word)
        if not segment:
            return Err("empty application id segment")
        segments.append(segment)
        if p.at_end():
            break
        if not p.expect("."):
            return Err("unexpected character in application id")

    if len(segments) < 2:
        return Err("expected '<applicationId>.<ext>'")
    extension = segments[-1]
    if not all(_is_alnum(ch) for ch in extension):
        return Err(f"invalid extension '{extension}'")

    return Ok(
        ExpansionFileName(
            slot="main" if slot == "main" else "patch",
            version_code=int(digits),
            application_id=".".join(segments[:-1]),
            extension=extension,
        )
    )


def parse_expansion_files(
    root: Path, relative_paths: Iterable[str]
) -> Result[list[ExpansionFile], NamingConventionError]:
    """Parse every discovered file name; any non-conforming name fails the run."""
    files: list[ExpansionFile] = []
    for rel in relative_paths:
        parsed = parse_expansion_file_name(PurePosixPath(rel).name)
        if isinstance(parsed, Err):
            return Err(NamingConventionError(path=rel))
        files.append(ExpansionFile(rel_path=rel, path=root / rel, name=parsed.value))
    return Ok(files)


def select_expansion_files(
    files: Iterable[ExpansionFile], group: ApplicationGroup
) -> dict[int, ExpansionFileSet]:
    """Build the per-version expansion sets for one application group.

    Files for another application id or for a version code outside the group
    are skipped silently. A later file replaces an earlier one in the same
    slot.
    """
    version_codes = set(group.version_codes)
    sets: dict[int, ExpansionFileSet] = {}
    for f in files:
        if f.name.application_id != group.application_id:
            continue
        if f.name.version_code not in version_codes:
            continue
        file_set = sets.setdefault(f.name.version_code, ExpansionFileSet())
        if f.name.slot == "main":
            file_set.main_file = f.path
        else:
            file_set.patch_file = f.path
    return dict(sorted(sets.items()))


def check_completeness(
    application_id: str,
    sets: dict[int, ExpansionFileSet],
    *,
    reuse_if_missing: bool,
) -> Result[None, CompletenessError]:
    """Every patch file needs a main file, unless a previous main may be reused."""
    if reuse_if_missing:
        return Ok(None)
    for file_set in sets.values():
        if file_set.patch_file is not None and file_set.main_file is None:
            return Err(
                CompletenessError(
                    application_id=application_id,
                    patch_file=file_set.patch_file.name,
                )
            )
    return Ok(None)
