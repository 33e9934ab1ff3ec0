"""Publish run control: validate, discover, group, then upload per application."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from playpub.core.result import Err, Ok, Result
from playpub.output.console import ConsoleProtocol, Style
from playpub.publish.errors import (
    CompletenessError,
    ConfigError,
    DiscoveryError,
    GroupError,
    PublishError,
    UploadFailure,
)
from playpub.publish.expansion import (
    ExpansionFile,
    check_completeness,
    parse_expansion_files,
    select_expansion_files,
)
from playpub.publish.grouper import group_artifacts
from playpub.publish.inspector import PackageReaderProtocol, inspect_artifacts
from playpub.publish.matcher import find_files
from playpub.publish.model import ApplicationGroup, BuildResult, ExpansionFileSet, ReleaseConfig
from playpub.publish.uploader import UploaderProtocol, UploadRequest
from playpub.publish.validation import ValidatedRelease, validate_release_config

__all__ = [
    "PublishRequest",
    "GroupOutcome",
    "PublishReport",
    "PublishOrchestrator",
    "validate_request",
]


@dataclass(frozen=True, slots=True)
class PublishRequest:
    """Everything one run needs, with variables already expanded."""

    root: Path
    apk_files_pattern: str | None
    release: ReleaseConfig
    apk_files_exclude_pattern: str | None = None
    expansion_files_pattern: str | None = None
    use_previous_expansion_files_if_missing: bool = False
    build_result: BuildResult | None = None
    skip_threshold: BuildResult = BuildResult.UNSTABLE
    # Problems found while reading the config, reported with validation.
    config_errors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class GroupOutcome:
    application_id: str
    error: GroupError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class PublishReport:
    skipped: bool
    groups: tuple[GroupOutcome, ...] = ()

    @property
    def success(self) -> bool:
        return all(g.ok for g in self.groups)

    @property
    def failed_groups(self) -> tuple[GroupOutcome, ...]:
        return tuple(g for g in self.groups if not g.ok)


def validate_request(request: PublishRequest) -> Result[ValidatedRelease, ConfigError]:
    """Validate release settings, merged with the config problems already found."""
    validated = validate_release_config(
        request.release, apk_files_pattern=request.apk_files_pattern
    )
    if isinstance(validated, Err):
        return Err(ConfigError(messages=validated.error.messages + request.config_errors))
    if request.config_errors:
        return Err(ConfigError(messages=request.config_errors))
    return validated


class PublishOrchestrator:
    """Runs one publish.

    Configuration and structural problems end the run with ``Err``. Problems
    scoped to one application are reported on the console, recorded in the
    report, and the next application is still attempted.
    """

    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        reader: PackageReaderProtocol,
        uploader: UploaderProtocol,
    ) -> None:
        self._console = console
        self._reader = reader
        self._uploader = uploader

    def run(self, request: PublishRequest) -> Result[PublishReport, PublishError]:
        if request.build_result is not None and request.build_result.is_worse_than(
            request.skip_threshold
        ):
            self._console.info("Skipping upload to Google Play due to build result")
            return Ok(PublishReport(skipped=True))

        validated = validate_request(request)
        if isinstance(validated, Err):
            return validated

        found = find_files(
            request.root, request.apk_files_pattern, request.apk_files_exclude_pattern
        )
        if isinstance(found, Err):
            return found
        if not found.value:
            return Err(DiscoveryError(pattern=request.apk_files_pattern or ""))

        artifacts = inspect_artifacts(request.root, found.value, self._reader)
        if isinstance(artifacts, Err):
            return artifacts
        groups = group_artifacts(artifacts.value)

        expansion_files = self._discover_expansion_files(request)
        if isinstance(expansion_files, Err):
            return expansion_files

        outcomes: list[GroupOutcome] = []
        for group in groups.values():
            outcomes.append(
                self._publish_group(group, expansion_files.value, request, validated.value)
            )
        return Ok(PublishReport(skipped=False, groups=tuple(outcomes)))

    def _discover_expansion_files(
        self, request: PublishRequest
    ) -> Result[list[ExpansionFile] | None, PublishError]:
        # None means expansion handling is off for this run.
        pattern = request.expansion_files_pattern
        if pattern is None or not pattern.strip():
            return Ok(None)
        found = find_files(request.root, pattern)
        if isinstance(found, Err):
            return found
        parsed = parse_expansion_files(request.root, found.value)
        if isinstance(parsed, Err):
            return parsed
        return Ok(parsed.value)

    def _publish_group(
        self,
        group: ApplicationGroup,
        expansion_files: list[ExpansionFile] | None,
        request: PublishRequest,
        release: ValidatedRelease,
    ) -> GroupOutcome:
        c = self._console
        app_id = group.application_id
        codes = ", ".join(str(v) for v in group.version_codes)
        c.header(f"{app_id} (versionCode {codes})")

        sets: dict[int, ExpansionFileSet] = {}
        if expansion_files is not None:
            sets = select_expansion_files(expansion_files, group)
            complete = check_completeness(
                app_id,
                sets,
                reuse_if_missing=request.use_previous_expansion_files_if_missing,
            )
            if isinstance(complete, Err):
                self._report_group_error(complete.error)
                return GroupOutcome(application_id=app_id, error=complete.error)

        upload_request = UploadRequest(
            application_id=app_id,
            files=group.files,
            expansion_files=sets,
            use_previous_expansion_files_if_missing=request.use_previous_expansion_files_if_missing,
            track=release.track,
            rollout_percentage=release.rollout_percentage,
            release_notes=request.release.release_notes,
        )
        try:
            uploaded = self._uploader.upload(upload_request)
        except Exception as e:  # noqa: BLE001
            uploaded = Err(str(e) or type(e).__name__)

        if isinstance(uploaded, Err):
            failure = UploadFailure(application_id=app_id, cause=uploaded.error)
            self._report_group_error(failure)
            return GroupOutcome(application_id=app_id, error=failure)

        c.success(f"{app_id}: uploaded {len(group.artifacts)} APK(s) to {release.track.value}")
        return GroupOutcome(application_id=app_id)

    def _report_group_error(self, error: GroupError) -> None:
        c = self._console
        c.error(error.message)
        match error:
            case CompletenessError(hint=hint):
                c.print(hint, Style.DIM)
            case UploadFailure(application_id=app_id):
                c.print(
                    f"- No changes have been applied to the Google Play account for {app_id}",
                    Style.DIM,
                )
