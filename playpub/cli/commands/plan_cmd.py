from __future__ import annotations

from pathlib import Path

import typer

from playpub.cli.commands._helpers import (
    CONFIG_OPTION,
    WORKDIR_OPTION,
    config_path_or_none,
    exit_on_publish_error,
    exit_with_code,
    resolve_request_or_exit,
)
from playpub.cli.context import build_context
from playpub.cli.settings import PublishOverrides
from playpub.core.errors import ErrorCode
from playpub.core.result import Err
from playpub.output.console import Style
from playpub.publish.inspector import AxmlPackageReader
from playpub.publish.orchestrator import PublishOrchestrator
from playpub.publish.uploader import DryRunUploader


def plan(
    apk_pattern: str | None = typer.Option(None, "--apk-pattern", help="APK include pattern(s)"),
    exclude_pattern: str | None = typer.Option(
        None, "--exclude-pattern", help="APK exclude pattern(s)"
    ),
    expansion_pattern: str | None = typer.Option(
        None, "--expansion-pattern", help="Expansion (OBB) file pattern(s)"
    ),
    reuse_expansion: bool | None = typer.Option(
        None,
        "--reuse-expansion/--no-reuse-expansion",
        help="Reuse the previously uploaded main expansion file when missing",
    ),
    track: str | None = typer.Option(None, "--track", help="internal|alpha|beta|production"),
    rollout: str | None = typer.Option(None, "--rollout", help="Rollout percentage, e.g. 10%"),
    build_result: str | None = typer.Option(
        None, "--build-result", help="Upstream build result (SUCCESS, UNSTABLE, FAILURE, ...)"
    ),
    workdir: Path | None = WORKDIR_OPTION,
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Resolve artifacts and show the uploads a publish would perform."""
    ctx = build_context(workdir=workdir, config_path=config_path_or_none(config))
    resolved = resolve_request_or_exit(
        ctx,
        PublishOverrides(
            apk_pattern=apk_pattern,
            exclude_pattern=exclude_pattern,
            expansion_pattern=expansion_pattern,
            reuse_expansion=reuse_expansion,
            track=track,
            rollout=rollout,
            build_result=build_result,
        ),
    )

    orchestrator = PublishOrchestrator(
        console=ctx.console,
        reader=AxmlPackageReader(),
        uploader=DryRunUploader(console=ctx.console),
    )
    result = orchestrator.run(resolved.request)
    if isinstance(result, Err):
        exit_on_publish_error(result.error, ctx)

    report = result.value
    if report.skipped:
        return

    ctx.console.newline()
    if report.success:
        ctx.console.success(f"{len(report.groups)} application(s) ready to publish")
        return

    failed = ", ".join(g.application_id for g in report.failed_groups)
    ctx.console.error(f"{len(report.failed_groups)} of {len(report.groups)} application(s) failed")
    ctx.console.print(f"failed: {failed}", Style.DIM)
    exit_with_code(int(ErrorCode.UPLOAD_ERROR))
