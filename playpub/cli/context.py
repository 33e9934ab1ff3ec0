from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from playpub.core.config import CONFIG_FILE_NAME, Config, load_config, load_config_or_default
from playpub.core.errors import ErrorCode
from playpub.core.result import Err
from playpub.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: Config
    console: ConsoleProtocol


def build_context(*, workdir: Path | None = None, config_path: Path | None = None) -> CLIContext:
    """Resolve the working directory and load its config.

    An explicit ``config_path`` must exist; the default ``playpub.toml`` is
    optional.
    """
    try:
        root = (workdir or Path.cwd()).expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --workdir: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))
    if not root.is_dir():
        typer.echo(f"error: working directory not found: {root}", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    if config_path is not None:
        loaded = load_config(config_path)
    else:
        loaded = load_config_or_default(root / CONFIG_FILE_NAME)
    if isinstance(loaded, Err):
        typer.echo(f"error: {loaded.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    return CLIContext(root=root, config=loaded.value, console=RichConsole())
