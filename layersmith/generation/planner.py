"""Reserve collection indices for 1-of-1 artworks."""

import logging

from ..core.errors import PlannerError
from ..core.models import UniqueArtwork
from .sequencer import DeterministicSequencer


logger = logging.getLogger(__name__)


def plan_unique_slots(
    artworks: list[UniqueArtwork],
    total: int,
    sequencer: DeterministicSequencer,
) -> dict[int, UniqueArtwork]:
    """Scatter unique artworks across the collection.

    Runs before any composition draw. For each artwork in the order given,
    draws ``floor(next() * total)`` until an unreserved index comes up.
    The search always terminates: ``len(artworks) < total`` leaves at least
    one free slot.

    Args:
        artworks: Unique artworks in supplied order
        total: Collection size N
        sequencer: Shared sequencer (consumed first)

    Returns:
        Mapping of reserved index -> artwork, in reservation order

    Raises:
        PlannerError: If there are at least as many artworks as items
    """
    if total <= 0:
        raise PlannerError(f"Collection size must be positive, got {total}")
    if len(artworks) >= total:
        raise PlannerError(
            f"{len(artworks)} unique artworks cannot be placed in a collection of {total}"
        )

    slots: dict[int, UniqueArtwork] = {}
    for artwork in artworks:
        position = sequencer.next_index(total)
        while position in slots:
            position = sequencer.next_index(total)
        slots[position] = artwork
        logger.debug(f"[Planner] '{artwork.name}' reserved index {position}")

    if slots:
        logger.info(f"[Planner] reserved {len(slots)} unique slots")
    return slots
