"""Typer application for the layersmith command line."""

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .. import __version__


app = typer.Typer(
    name="layersmith",
    help="Generate deterministic layered artwork collections and their trait metadata.",
    add_completion=False,
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def exit_with_error(error: Exception) -> NoReturn:
    """Report a fatal error and stop with exit code 1."""
    console.print(f"[red]✗[/red] {escape(str(error))}")
    raise typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"layersmith {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Without a command, generates the project in the current directory."""
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        from .commands.generate import run_generate

        run_generate(Path.cwd())


# Register commands
from .commands import generate, rarity, gif, variation, validate  # noqa: E402,F401
