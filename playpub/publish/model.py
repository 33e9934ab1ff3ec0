from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path


class Track(Enum):
    """Release channel on the store backend."""

    INTERNAL = "internal"
    ALPHA = "alpha"
    BETA = "beta"
    PRODUCTION = "production"

    @classmethod
    def from_config_value(cls, value: str | None) -> Track | None:
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def enforces_rollout(self) -> bool:
        return self is Track.PRODUCTION


class BuildResult(IntEnum):
    """Upstream build outcome, ordered from best to worst."""

    SUCCESS = 0
    UNSTABLE = 1
    FAILURE = 2
    NOT_BUILT = 3
    ABORTED = 4

    @classmethod
    def from_config_value(cls, value: str | None) -> BuildResult | None:
        if value is None:
            return None
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            return None

    def is_worse_than(self, other: BuildResult) -> bool:
        return self > other


@dataclass(frozen=True, slots=True)
class Artifact:
    """An application package with its identity metadata."""

    application_id: str
    path: Path
    version_code: int


@dataclass(slots=True)
class ApplicationGroup:
    """All artifacts of one application id, in discovery order."""

    application_id: str
    artifacts: list[Artifact] = field(default_factory=list)

    @property
    def version_codes(self) -> tuple[int, ...]:
        """Sorted, de-duplicated version codes of this group."""
        return tuple(sorted({a.version_code for a in self.artifacts}))

    @property
    def files(self) -> tuple[Path, ...]:
        return tuple(a.path for a in self.artifacts)


@dataclass(slots=True)
class ExpansionFileSet:
    """Main and patch expansion files for one version code."""

    main_file: Path | None = None
    patch_file: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseNote:
    language: str
    text: str


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Release settings for one run, already variable-expanded."""

    track_name: str | None
    rollout_percentage: str | None
    release_notes: tuple[ReleaseNote, ...] = ()
