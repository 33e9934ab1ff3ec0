"""Read identity metadata from application packages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from playpub.core.result import Err, Ok, Result
from playpub.publish.errors import ParseError
from playpub.publish.model import Artifact

__all__ = [
    "PackageInfo",
    "PackageReaderProtocol",
    "AxmlPackageReader",
    "inspect_artifact",
    "inspect_artifacts",
]


@dataclass(frozen=True, slots=True)
class PackageInfo:
    """Raw manifest values, before validation."""

    package: str | None
    version_code: str | None


class PackageReaderProtocol(Protocol):
    """Reads the manifest of a package file."""

    def read(self, path: Path) -> Result[PackageInfo, ParseError]: ...


class AxmlPackageReader:
    """Reads the binary AndroidManifest.xml of an APK via pyaxmlparser."""

    def read(self, path: Path) -> Result[PackageInfo, ParseError]:
        from pyaxmlparser import APK

        try:
            apk = APK(str(path))
        except FileNotFoundError:
            return Err(ParseError(path=path, reason="file not found"))
        except Exception as e:  # noqa: BLE001
            return Err(ParseError(path=path, reason=f"not a valid APK ({e})"))

        if not apk.is_valid_APK():
            return Err(ParseError(path=path, reason="missing AndroidManifest.xml"))

        version_code = apk.version_code
        return Ok(
            PackageInfo(
                package=apk.package or None,
                version_code=str(version_code) if version_code is not None else None,
            )
        )


def inspect_artifact(path: Path, reader: PackageReaderProtocol) -> Result[Artifact, ParseError]:
    """Extract application id and version code from one package."""
    info = reader.read(path)
    if isinstance(info, Err):
        return info

    application_id = (info.value.package or "").strip()
    if not application_id:
        return Err(ParseError(path=path, reason="manifest has no package name"))

    raw_code = (info.value.version_code or "").strip()
    if not raw_code.isdigit():
        return Err(ParseError(path=path, reason=f"invalid versionCode: {raw_code or '<missing>'}"))

    return Ok(Artifact(application_id=application_id, path=path, version_code=int(raw_code)))


def inspect_artifacts(
    root: Path,
    relative_paths: list[str],
    reader: PackageReaderProtocol,
) -> Result[list[Artifact], ParseError]:
    """Inspect every path in order; the first unreadable package stops the scan."""
    artifacts: list[Artifact] = []
    for rel in relative_paths:
        result = inspect_artifact(root / rel, reader)
        if isinstance(result, Err):
            return result
        artifacts.append(result.value)
    return Ok(artifacts)
