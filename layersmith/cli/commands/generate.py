"""Generate command: render and persist a full collection."""

import re
import time
from pathlib import Path

import typer
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

from ...core.errors import LayersmithError
from ...core.rendering import PillowSurface
from ...generation import GenerationResult, generate_collection
from ...project import CollectionWriter, load_project
from ..app import app, console, exit_with_error


def parse_seed(seed: str) -> int | str:
    """Integer-looking seeds become ints; anything else is used as text."""
    return int(seed) if re.fullmatch(r"-?\d+", seed) else seed


def run_generate(
    root: Path,
    seed: str | None = None,
    persist: bool = True,
    show_progress: bool = True,
) -> GenerationResult:
    """Load the project at ``root`` and generate its collection.

    With ``persist`` off no images are decoded, rendered or written; the
    sequencer is consumed identically, so attributes and dna are unchanged.
    """
    try:
        project = load_project(root, load_images=persist)
    except LayersmithError as e:
        exit_with_error(e)

    config = project.config
    run_seed = config.seed
    if seed is not None:
        run_seed = parse_seed(seed)

    surface = None
    writer = None
    if persist:
        surface = PillowSurface(config.output.width, config.output.height)
        writer = CollectionWriter(project.output_dir, config.image_format)

    start = time.time()
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        disable=not show_progress,
        transient=True,
    ) as progress:
        task = progress.add_task("Generating", total=config.size)
        try:
            result = generate_collection(
                project.catalog,
                config.size,
                seed=run_seed,
                traits=config.trait_specs(),
                unique_artworks=project.unique_artworks,
                template=config.metadata,
                image_format=config.image_format,
                surface=surface,
                sink=writer,
                on_progress=lambda current, total: progress.update(task, completed=current),
            )
        except LayersmithError as e:
            exit_with_error(e)

    elapsed = time.time() - start
    stats = result.stats
    console.print(
        f"[green]✓[/green] Generated {stats.items} items "
        f"({stats.unique_items} unique, {stats.collisions} collisions) "
        f"with seed [bold]{result.seed}[/bold] in {elapsed:.1f}s"
    )
    if writer is not None:
        console.print(f"  Output: {writer.output_dir}")
    return result


@app.command("generate")
def generate_command(
    path: Path = typer.Argument(Path("."), help="Project directory holding metacreator.json"),
    seed: str | None = typer.Option(None, "--seed", "-s", help="Override the configured seed"),
) -> None:
    """Generate and persist the collection for a project."""
    run_generate(path, seed=seed)
