"""Main generation loop: plan, compose, roll traits, finalize.

Every sequencer-dependent decision for item ``i`` is made before item ``i``
is handed to the sink, and items are produced in ascending index order.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable

from ..core.models import (
    GeneratedItem,
    MetadataRecord,
    MetadataTemplate,
    TraitSpec,
    UniqueArtwork,
)
from ..core.rendering import DrawableSurface
from .catalog import LayerCatalog
from .composer import MAX_ATTEMPTS, CompositionEngine
from .metadata import MetadataBuilder
from .planner import plan_unique_slots
from .sequencer import DeterministicSequencer
from .traits import TraitAssigner


logger = logging.getLogger(__name__)

MAX_RANDOM_SEED = 10_000_000

# Called once per finalized item with the encoded image (None without a surface).
ItemSink = Callable[[GeneratedItem, MetadataRecord, bytes | None], None]


@dataclass
class GenerationStats:
    """Counters collected over one run."""

    items: int = 0
    unique_items: int = 0
    attempts: int = 0
    collisions: int = 0
    draws: int = 0


@dataclass
class GenerationResult:
    """A completed collection and the seed that produced it."""

    seed: int | str
    items: list[GeneratedItem] = field(default_factory=list)
    records: list[MetadataRecord] = field(default_factory=list)
    unique_slots: dict[int, str] = field(default_factory=dict)
    stats: GenerationStats = field(default_factory=GenerationStats)


def random_seed() -> int:
    return random.randint(0, MAX_RANDOM_SEED)


def generate_collection(
    catalog: LayerCatalog,
    size: int,
    seed: int | str | None = None,
    traits: list[TraitSpec] | None = None,
    unique_artworks: list[UniqueArtwork] | None = None,
    template: MetadataTemplate | None = None,
    image_format: str = "png",
    surface: DrawableSurface | None = None,
    sink: ItemSink | None = None,
    max_attempts: int = MAX_ATTEMPTS,
    on_progress: Callable[[int, int], None] | None = None,
) -> GenerationResult:
    """Generate a full collection of ``size`` items.

    Args:
        catalog: Layer catalog; its usage counters are updated in place
        size: Collection size N
        seed: Sequencer seed; a random one is picked (and returned) if None
        traits: Trait specs in declaration order
        unique_artworks: 1-of-1 artworks to scatter across the collection
        template: Metadata name prefix / description
        image_format: ``png`` or ``jpg``, used for encoding and image URLs
        surface: Canvas to paint items onto; None skips rendering
        sink: Receives each finalized item, its record and encoded image
        max_attempts: Per-index retry budget for unique compositions
        on_progress: Optional callback(current, total)

    Returns:
        GenerationResult with items, records and stats

    Raises:
        PlannerError: Unique artworks cannot be placed
        GenerationExhausted: The layer space ran out of new combinations
    """
    if seed is None:
        seed = random_seed()
    logger.info(f"[Generate] size={size} seed={seed!r} layers={catalog.keys}")

    sequencer = DeterministicSequencer(seed)
    artworks = list(unique_artworks or [])
    slots = plan_unique_slots(artworks, size, sequencer)

    composable = size - len(slots)
    space = catalog.combination_space()
    if composable > space:
        logger.warning(
            f"[Generate] {composable} composed items requested but only {space} "
            f"layer combinations exist; generation will fail"
        )

    engine = CompositionEngine(
        catalog, sequencer, unique_slots=slots, surface=surface, max_attempts=max_attempts
    )
    assigner = TraitAssigner(traits or [], size, sequencer)
    builder = MetadataBuilder(template, image_format)

    result = GenerationResult(
        seed=seed,
        unique_slots={index: artwork.name for index, artwork in slots.items()},
    )
    stats = result.stats

    for index in range(size):
        logger.info(f"[Generate] creating item #{index + 1}")
        composition = engine.compose_item(index)
        assigner.assign(composition.attributes)

        item = builder.build_item(composition)
        record = builder.build_record(item)
        result.items.append(item)
        result.records.append(record)

        stats.items += 1
        if item.is_unique:
            stats.unique_items += 1
        else:
            stats.attempts += composition.attempts
            stats.collisions += composition.attempts - 1

        if sink is not None:
            image = surface.encode(image_format) if surface is not None else None
            sink(item, record, image)
        if on_progress:
            on_progress(index + 1, size)

    stats.draws = sequencer.draws
    logger.info(
        f"[Generate] done: {stats.items} items, {stats.unique_items} unique, "
        f"{stats.collisions} collisions, {stats.draws} draws"
    )
    return result
