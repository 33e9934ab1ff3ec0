from __future__ import annotations

import math
from dataclasses import dataclass

from playpub.core.result import Err, Ok, Result
from playpub.publish.errors import ConfigError
from playpub.publish.model import ReleaseConfig, Track

__all__ = [
    "DEFAULT_ROLLOUT_PERCENTAGE",
    "ROLLOUT_PERCENTAGES",
    "ValidatedRelease",
    "parse_rollout_percentage",
    "validate_release_config",
]

DEFAULT_ROLLOUT_PERCENTAGE = 100.0

# Staged rollout checkpoints accepted by the production track.
ROLLOUT_PERCENTAGES: tuple[float, ...] = (0.5, 1.0, 5.0, 10.0, 20.0, 50.0, 100.0)


@dataclass(frozen=True, slots=True)
class ValidatedRelease:
    track: Track
    rollout_percentage: float


def parse_rollout_percentage(value: str | None) -> float:
    """Parse ``"10"``, ``"10%"`` or ``" 0.5 % "``; anything else means 100."""
    if value is None:
        return DEFAULT_ROLLOUT_PERCENTAGE
    cleaned = value.replace("%", "").strip()
    try:
        pct = float(cleaned)
    except ValueError:
        return DEFAULT_ROLLOUT_PERCENTAGE
    if not math.isfinite(pct):
        return DEFAULT_ROLLOUT_PERCENTAGE
    return pct


def validate_release_config(
    config: ReleaseConfig,
    *,
    apk_files_pattern: str | None,
) -> Result[ValidatedRelease, ConfigError]:
    """Check artifact pattern, track and rollout, collecting every problem."""
    errors: list[str] = []

    if apk_files_pattern is None or not apk_files_pattern.strip():
        errors.append("Path or pattern to APK file was not specified")

    track_name = (config.track_name or "").strip().lower() or None
    track = Track.from_config_value(track_name)
    pct = parse_rollout_percentage(config.rollout_percentage)

    if track_name is None:
        errors.append("Release track was not specified")
    elif track is None:
        errors.append(f"'{track_name}' is not a valid release track")
    elif track.enforces_rollout and pct not in ROLLOUT_PERCENTAGES:
        errors.append(f"{pct:.2f}% is not a valid rollout percentage")

    if errors or track is None:
        return Err(ConfigError(messages=tuple(errors)))
    return Ok(ValidatedRelease(track=track, rollout_percentage=pct))
