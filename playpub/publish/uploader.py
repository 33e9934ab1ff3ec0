"""Boundary to the store upload client.

The network client itself lives outside this package. It only has to
implement :class:`UploaderProtocol`: return ``Ok(None)`` when the edit was
committed, ``Err(cause)`` when the backend rejected it. Raising is tolerated
and treated like a rejection by the orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from playpub.core.result import Ok, Result
from playpub.output.console import ConsoleProtocol, Style
from playpub.publish.model import ExpansionFileSet, ReleaseNote, Track

__all__ = ["UploadRequest", "UploaderProtocol", "DryRunUploader"]


@dataclass(frozen=True, slots=True)
class UploadRequest:
    application_id: str
    files: tuple[Path, ...]
    expansion_files: dict[int, ExpansionFileSet]
    use_previous_expansion_files_if_missing: bool
    track: Track
    rollout_percentage: float
    release_notes: tuple[ReleaseNote, ...] = ()


class UploaderProtocol(Protocol):
    def upload(self, request: UploadRequest) -> Result[None, str]: ...


def _empty_requests() -> list[UploadRequest]:
    return []


@dataclass
class DryRunUploader:
    """Prints each upload it would perform and records the request."""

    console: ConsoleProtocol
    requests: list[UploadRequest] = field(default_factory=_empty_requests)

    def upload(self, request: UploadRequest) -> Result[None, str]:
        self.requests.append(request)
        c = self.console
        c.print(f"track: {request.track.value} ({request.rollout_percentage:g}%)", Style.DIM)
        for path in request.files:
            c.print(f"- apk: {path.name}")
        for version_code, file_set in request.expansion_files.items():
            main = file_set.main_file.name if file_set.main_file else "-"
            patch = file_set.patch_file.name if file_set.patch_file else "-"
            c.print(f"- obb {version_code}: main={main} patch={patch}")
        for note in request.release_notes:
            c.print(f"- notes [{note.language}]: {note.text}", Style.DIM)
        return Ok(None)
