"""Typed loading of ``playpub.toml``.

Only the ``[publish]`` table is read. Values are kept as plain strings here;
placeholders are expanded by :func:`expand_vars` before anything reaches the
publish engine.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table, get_table_list

__all__ = [
    "CONFIG_FILE_NAME",
    "MAX_RELEASE_NOTES_LENGTH",
    "ConfigLoadError",
    "NoteConfig",
    "PublishConfig",
    "Config",
    "load_config",
    "load_config_or_default",
    "expand_vars",
    "check_release_notes",
]

CONFIG_FILE_NAME = "playpub.toml"

MAX_RELEASE_NOTES_LENGTH = 500

_LANGUAGE_RE = re.compile(r"^[a-z]{2,3}(-[A-Z]{2}|-[0-9]{3}|-[A-Za-z]{4})?$")
_VAR_RE = re.compile(r"\$(?:\{(\w+)\}|(\w+))")


@dataclass(frozen=True, slots=True)
class ConfigLoadError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class NoteConfig:
    language: str
    text: str


def _empty_notes() -> tuple[NoteConfig, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class PublishConfig:
    apk_files_pattern: str | None = None
    apk_files_exclude_pattern: str | None = None
    expansion_files_pattern: str | None = None
    use_previous_expansion_files_if_missing: bool = False
    track: str | None = None
    rollout_percentage: str | None = None
    build_result: str | None = None
    skip_threshold: str | None = None
    release_notes: tuple[NoteConfig, ...] = field(default_factory=_empty_notes)

    def expanded(self, env: Mapping[str, str] | None = None) -> PublishConfig:
        """Return a copy with ``$VAR`` / ``${VAR}`` placeholders substituted."""
        e = os.environ if env is None else env
        return replace(
            self,
            apk_files_pattern=expand_vars(self.apk_files_pattern, e),
            apk_files_exclude_pattern=expand_vars(self.apk_files_exclude_pattern, e),
            expansion_files_pattern=expand_vars(self.expansion_files_pattern, e),
            track=expand_vars(self.track, e),
            rollout_percentage=expand_vars(self.rollout_percentage, e),
            build_result=expand_vars(self.build_result, e),
            release_notes=tuple(
                NoteConfig(
                    language=expand_vars(n.language, e) or "",
                    text=expand_vars(n.text, e) or "",
                )
                for n in self.release_notes
            ),
        )


@dataclass(frozen=True, slots=True)
class Config:
    publish: PublishConfig = field(default_factory=PublishConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML."""
        publish: StrDict = get_table(data, "publish") or {}
        notes = tuple(
            NoteConfig(language=get_str(n, "language") or "", text=get_str(n, "text") or "")
            for n in (get_table_list(publish, "release_notes") or [])
        )
        return cls(
            publish=PublishConfig(
                apk_files_pattern=get_str(publish, "apk_files_pattern"),
                apk_files_exclude_pattern=get_str(publish, "apk_files_exclude_pattern"),
                expansion_files_pattern=get_str(publish, "expansion_files_pattern"),
                use_previous_expansion_files_if_missing=(
                    get_bool(publish, "use_previous_expansion_files_if_missing") or False
                ),
                track=get_str(publish, "track"),
                rollout_percentage=get_str(publish, "rollout_percentage"),
                build_result=get_str(publish, "build_result"),
                skip_threshold=get_str(publish, "skip_threshold"),
                release_notes=notes,
            )
        )


def expand_vars(value: str | None, env: Mapping[str, str]) -> str | None:
    """Substitute ``$VAR`` and ``${VAR}``; unknown names are left as written.

    Returns None when the result is blank.
    """
    if value is None:
        return None

    def sub(m: re.Match[str]) -> str:
        name = m.group(1) or m.group(2)
        return env.get(name, m.group(0))

    expanded = _VAR_RE.sub(sub, value).strip()
    return expanded or None


def check_release_notes(notes: tuple[NoteConfig, ...]) -> tuple[list[str], list[str]]:
    """Return ``(errors, warnings)`` for expanded release notes."""
    errors: list[str] = []
    warnings: list[str] = []
    for n in notes:
        if not _LANGUAGE_RE.match(n.language):
            warnings.append(
                f"release notes language '{n.language}' should be a code like 'be' or 'en-GB'"
            )
        if len(n.text) > MAX_RELEASE_NOTES_LENGTH:
            errors.append(
                f"release notes for '{n.language}' must be {MAX_RELEASE_NOTES_LENGTH} "
                f"characters or fewer (got {len(n.text)})"
            )
    return errors, warnings


def _parse_toml(path: Path) -> Result[StrDict, ConfigLoadError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigLoadError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigLoadError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigLoadError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigLoadError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigLoadError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigLoadError]:
    """Load and parse configuration from a TOML file."""
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[Config, ConfigLoadError]:
    """Like :func:`load_config`, but a missing file yields the defaults."""
    if not path.exists():
        return Ok(Config())
    return load_config(path)
