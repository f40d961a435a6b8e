"""Test command: dry-run generation followed by an immediate rarity report.

Nothing is rendered or written except the rarity report, which makes this a
fast loop for tuning trait chances and layer caps.
"""

from pathlib import Path

import typer

from ...project import RARITIES_FILENAME, save_rarities
from ...rarity import calculate_rarities
from ..app import app, console
from .generate import run_generate
from .rarity import print_rarities


@app.command("test")
def variation_command(
    path: Path = typer.Argument(Path("."), help="Project directory holding metacreator.json"),
    seed: str | None = typer.Option(None, "--seed", "-s", help="Override the configured seed"),
    output: Path = typer.Option(
        Path(RARITIES_FILENAME), "--output", "-o", help="Where to write the rarity report"
    ),
    limit: int = typer.Option(50, "--limit", help="Rows to print"),
) -> None:
    """Run generation without persisting and report rarities."""
    result = run_generate(path, seed=seed, persist=False, show_progress=False)
    entries = calculate_rarities(result.records)
    save_rarities(entries, output)
    print_rarities(entries, len(result.records), limit)
    console.print(f"[green]✓[/green] Saved rarity report to {output}")
