"""Rarity command: trait frequency report over an existing metadata set."""

from pathlib import Path

import typer
from rich.table import Table

from ...core.errors import LayersmithError
from ...core.models import RarityEntry
from ...project import RARITIES_FILENAME, load_records, save_rarities
from ...rarity import calculate_rarities
from ..app import app, console, exit_with_error


def print_rarities(entries: list[RarityEntry], total_items: int, limit: int | None = None) -> None:
    table = Table(title=f"Rarities ({total_items} items)")
    table.add_column("Attribute")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")

    shown = entries if limit is None else entries[:limit]
    for entry in shown:
        share = entry.value / total_items if total_items else 0.0
        table.add_row(entry.attribute, str(entry.value), f"{share:.1%}")

    console.print(table)
    if limit is not None and len(entries) > limit:
        console.print(f"  ... {len(entries) - limit} more in the report file")


@app.command("rarity")
def rarity_command(
    path: Path = typer.Option(Path("."), "--path", "-p", help="Directory of metadata JSON files"),
    exclude: str = typer.Option("", "--exclude", "-e", help="Comma-separated trait types to skip"),
    output: Path = typer.Option(
        Path(RARITIES_FILENAME), "--output", "-o", help="Where to write the rarity report"
    ),
    limit: int = typer.Option(50, "--limit", help="Rows to print"),
) -> None:
    """Count trait values across an existing collection."""
    try:
        records = load_records(path)
    except LayersmithError as e:
        exit_with_error(e)

    entries = calculate_rarities(records, exclude=exclude.split(","))
    save_rarities(entries, output)
    print_rarities(entries, len(records), limit)
    console.print(f"[green]✓[/green] Saved rarity report to {output}")
