"""Merge CLI overrides into the file config and build a publish request."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from playpub.core.config import PublishConfig, check_release_notes
from playpub.core.result import Err, Ok, Result
from playpub.publish.errors import ConfigError
from playpub.publish.model import BuildResult, ReleaseConfig, ReleaseNote
from playpub.publish.orchestrator import PublishRequest


@dataclass(frozen=True, slots=True)
class PublishOverrides:
    apk_pattern: str | None = None
    exclude_pattern: str | None = None
    expansion_pattern: str | None = None
    reuse_expansion: bool | None = None
    track: str | None = None
    rollout: str | None = None
    build_result: str | None = None


@dataclass(frozen=True, slots=True)
class ResolvedRequest:
    request: PublishRequest
    warnings: tuple[str, ...]


def apply_overrides(config: PublishConfig, overrides: PublishOverrides) -> PublishConfig:
    return replace(
        config,
        apk_files_pattern=overrides.apk_pattern or config.apk_files_pattern,
        apk_files_exclude_pattern=overrides.exclude_pattern or config.apk_files_exclude_pattern,
        expansion_files_pattern=overrides.expansion_pattern or config.expansion_files_pattern,
        use_previous_expansion_files_if_missing=(
            overrides.reuse_expansion
            if overrides.reuse_expansion is not None
            else config.use_previous_expansion_files_if_missing
        ),
        track=overrides.track or config.track,
        rollout_percentage=overrides.rollout or config.rollout_percentage,
        build_result=overrides.build_result or config.build_result,
    )


def resolve_request(
    *,
    root: Path,
    config: PublishConfig,
    overrides: PublishOverrides,
    env: Mapping[str, str] | None = None,
) -> Result[ResolvedRequest, ConfigError]:
    cfg = apply_overrides(config, overrides).expanded(env)

    # Notes problems are reported with the track/rollout checks, after the
    # build-result gate; only what the gate itself needs is fatal here.
    note_errors, warnings = check_release_notes(cfg.release_notes)
    errors: list[str] = []

    build_result = BuildResult.from_config_value(cfg.build_result)
    if cfg.build_result is not None and build_result is None:
        errors.append(f"'{cfg.build_result}' is not a valid build result")

    threshold = BuildResult.UNSTABLE
    if cfg.skip_threshold is not None:
        parsed = BuildResult.from_config_value(cfg.skip_threshold)
        if parsed is None:
            errors.append(f"'{cfg.skip_threshold}' is not a valid skip threshold")
        else:
            threshold = parsed

    if errors:
        return Err(ConfigError(messages=tuple(errors)))

    request = PublishRequest(
        root=root,
        apk_files_pattern=cfg.apk_files_pattern,
        apk_files_exclude_pattern=cfg.apk_files_exclude_pattern,
        expansion_files_pattern=cfg.expansion_files_pattern,
        use_previous_expansion_files_if_missing=cfg.use_previous_expansion_files_if_missing,
        release=ReleaseConfig(
            track_name=cfg.track,
            rollout_percentage=cfg.rollout_percentage,
            release_notes=tuple(ReleaseNote(n.language, n.text) for n in cfg.release_notes),
        ),
        build_result=build_result,
        skip_threshold=threshold,
        config_errors=tuple(note_errors),
    )
    return Ok(ResolvedRequest(request=request, warnings=tuple(warnings)))
