"""Validate command: check a project without generating anything."""

from pathlib import Path

import typer
from rich.table import Table

from ...core.errors import LayersmithError
from ...core.models import NumericRange
from ...project import load_project
from ..app import app, console, exit_with_error


@app.command("validate")
def validate_command(
    path: Path = typer.Argument(Path("."), help="Project directory holding metacreator.json"),
) -> None:
    """Load a project's config and layers and report its combination space."""
    try:
        project = load_project(path, load_images=False)
    except LayersmithError as e:
        exit_with_error(e)

    config = project.config
    catalog = project.catalog

    table = Table(title="Layers")
    table.add_column("Layer")
    table.add_column("Variants", justify="right")
    table.add_column("Capped", justify="right")
    for layer in catalog:
        capped = sum(1 for v in layer.variants if v.is_capped)
        table.add_row(layer.key, str(len(layer.variants)), str(capped))
    console.print(table)

    for spec in config.trait_specs():
        if isinstance(spec.kind, NumericRange):
            kind = f"range {spec.kind.min:g}..{spec.kind.max:g} ({spec.kind.precision} dp)"
        else:
            kind = f"{len(spec.kind.values)} values"
        console.print(f"  trait [bold]{spec.key}[/bold]: chance {spec.chance:g}/{config.size}, {kind}")

    uniques = len(project.unique_artworks)
    composable = config.size - uniques
    space = catalog.combination_space()
    console.print(f"  size {config.size}, unique artworks {uniques}, combinations {space}")

    if uniques >= config.size:
        console.print(f"[red]✗[/red] {uniques} unique artworks do not fit in {config.size} items")
        raise typer.Exit(1)
    if composable > space:
        console.print(
            f"[red]✗[/red] {composable} composed items requested but only {space} combinations exist"
        )
        raise typer.Exit(1)

    console.print("[green]✓[/green] Project is valid")
