"""GIF command: assemble rendered frames into an animation."""

from pathlib import Path

import typer

from ...core.errors import LayersmithError
from ...core.rendering import DEFAULT_FRAME_DELAY_MS, DEFAULT_GIF_SIZE, assemble_gif
from ..app import app, console, exit_with_error


@app.command("gif")
def gif_command(
    path: Path = typer.Option(Path("."), "--path", "-p", help="Directory of PNG frames"),
    output: Path = typer.Option(Path("animated.gif"), "--output", "-o", help="GIF file to write"),
    size: int = typer.Option(DEFAULT_GIF_SIZE[0], "--size", help="Square frame size in pixels"),
    delay: int = typer.Option(DEFAULT_FRAME_DELAY_MS, "--delay", help="Frame delay in ms"),
) -> None:
    """Assemble every PNG in a folder into one GIF."""
    try:
        count = assemble_gif(path, output, size=(size, size), delay_ms=delay)
    except LayersmithError as e:
        exit_with_error(e)

    console.print(f"[green]✓[/green] Wrote {count} frames to {output}")
