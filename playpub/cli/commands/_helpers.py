"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer

from playpub.cli.settings import PublishOverrides, ResolvedRequest, resolve_request
from playpub.core.result import Err
from playpub.output.errors import print_publish_error, publish_error_exit_code
from playpub.publish.errors import PublishError

if TYPE_CHECKING:
    from playpub.cli.context import CLIContext


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)


def exit_on_publish_error(error: PublishError, ctx: CLIContext) -> NoReturn:
    print_publish_error(error, ctx.console)
    exit_with_code(publish_error_exit_code(error))


def resolve_request_or_exit(ctx: CLIContext, overrides: PublishOverrides) -> ResolvedRequest:
    resolved = resolve_request(root=ctx.root, config=ctx.config.publish, overrides=overrides)
    if isinstance(resolved, Err):
        exit_on_publish_error(resolved.error, ctx)
    for w in resolved.value.warnings:
        ctx.console.warning(w)
    return resolved.value


WORKDIR_OPTION = typer.Option(
    None, "--workdir", "-C", help="Directory the artifact patterns are relative to"
)
CONFIG_OPTION = typer.Option(
    None, "--config", help="Config file (default: ./playpub.toml, optional)"
)


def config_path_or_none(path: Path | None) -> Path | None:
    return path.expanduser() if path is not None else None
