from __future__ import annotations

from pathlib import Path

import typer

from playpub.cli.commands._helpers import (
    CONFIG_OPTION,
    WORKDIR_OPTION,
    config_path_or_none,
    exit_on_publish_error,
    resolve_request_or_exit,
)
from playpub.cli.context import build_context
from playpub.cli.settings import PublishOverrides
from playpub.core.result import Err
from playpub.publish.orchestrator import validate_request


def validate(
    track: str | None = typer.Option(None, "--track", help="internal|alpha|beta|production"),
    rollout: str | None = typer.Option(None, "--rollout", help="Rollout percentage, e.g. 10%"),
    apk_pattern: str | None = typer.Option(None, "--apk-pattern", help="APK include pattern"),
    workdir: Path | None = WORKDIR_OPTION,
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Check the release configuration without touching any file."""
    ctx = build_context(workdir=workdir, config_path=config_path_or_none(config))
    resolved = resolve_request_or_exit(
        ctx, PublishOverrides(apk_pattern=apk_pattern, track=track, rollout=rollout)
    )

    validated = validate_request(resolved.request)
    if isinstance(validated, Err):
        exit_on_publish_error(validated.error, ctx)

    release = validated.value
    ctx.console.success(
        f"track {release.track.value}, rollout {release.rollout_percentage:g}%"
    )
