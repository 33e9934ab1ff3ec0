from __future__ import annotations

import typer

from playpub import __version__
from playpub.cli.commands.plan_cmd import plan
from playpub.cli.commands.validate_cmd import validate


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Resolve Android release artifacts and publish them per application.",
)

app.command()(plan)
app.command()(validate)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    pass


def main() -> None:
    app()
