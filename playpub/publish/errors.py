"""Failure kinds of a publish run.

Global kinds abort the whole run; group kinds fail a single application
group and the run moves on to the next one.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ConfigError:
    messages: tuple[str, ...]

    @property
    def message(self) -> str:
        return "; ".join(self.messages)


@dataclass(frozen=True, slots=True)
class DiscoveryError:
    pattern: str

    @property
    def message(self) -> str:
        return f"No APK files matching the pattern '{self.pattern}' could be found"


@dataclass(frozen=True, slots=True)
class ParseError:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"Could not read application package '{self.path.name}': {self.reason}"


@dataclass(frozen=True, slots=True)
class NamingConventionError:
    path: str

    @property
    def message(self) -> str:
        return f"Expansion file '{self.path}' doesn't match the required naming scheme"

    @property
    def hint(self) -> str:
        return "Expected: <main|patch>.<versionCode>.<applicationId>.obb"


@dataclass(frozen=True, slots=True)
class CompletenessError:
    application_id: str
    patch_file: str

    @property
    def message(self) -> str:
        return (
            f"Patch expansion file '{self.patch_file}' was provided, but no main expansion file "
            "was provided, and the option to reuse a pre-existing expansion file was disabled"
        )

    @property
    def hint(self) -> str:
        return "Google Play requires that each APK with a patch file also has a main file."


@dataclass(frozen=True, slots=True)
class UploadFailure:
    application_id: str
    cause: str

    @property
    def message(self) -> str:
        return f"Upload failed: {self.cause}"


PublishError = ConfigError | DiscoveryError | ParseError | NamingConventionError

GroupError = CompletenessError | UploadFailure
