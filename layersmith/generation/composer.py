"""Composition engine: one unique layer combination per collection index."""

import hashlib
import logging
from dataclasses import dataclass, field
from typing import Any

from ..core.errors import GenerationExhausted
from ..core.models import UniqueArtwork, VariantAsset
from ..core.rendering import DrawableSurface
from .catalog import LayerCatalog
from .sequencer import DeterministicSequencer


logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 1000
MAX_VARIANT_REDRAWS = 10000


def sha256_hex(data: str) -> str:
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def fingerprint(variant_names: list[str]) -> str:
    """Content fingerprint of an ordered list of selected variant names."""
    return sha256_hex(",".join(variant_names))


@dataclass
class Composition:
    """Outcome of composing one index, before traits are rolled."""

    index: int
    selected: list[tuple[str, VariantAsset]] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)
    content_fingerprint: str | None = None
    unique_artwork: UniqueArtwork | None = None
    attempts: int = 0

    @property
    def variant_names(self) -> list[tuple[str, str]]:
        return [(key, variant.name) for key, variant in self.selected]


class CompositionEngine:
    """Draws one variant per layer per index and enforces uniqueness.

    The engine owns the accepted-fingerprint set; usage counters live on the
    catalog's variants and only move when a composition is accepted. Indices
    must be composed in ascending order for output to be reproducible.

    Args:
        catalog: Layer catalog in paint order
        sequencer: Shared sequencer
        unique_slots: Reserved index -> 1-of-1 artwork
        surface: Optional canvas to paint accepted items onto
        max_attempts: Whole-draw retries allowed per index
    """

    def __init__(
        self,
        catalog: LayerCatalog,
        sequencer: DeterministicSequencer,
        unique_slots: dict[int, UniqueArtwork] | None = None,
        surface: DrawableSurface | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self.catalog = catalog
        self.sequencer = sequencer
        self.unique_slots = unique_slots or {}
        self.surface = surface
        self.max_attempts = max_attempts
        self.accepted: set[str] = set()

    def compose_item(self, index: int) -> Composition:
        """Compose the item at ``index``.

        Reserved slots bind their unique artwork and skip variant selection.
        Other indices redraw every layer until the fingerprint is new.

        Raises:
            GenerationExhausted: If no new combination is found within
                ``max_attempts`` attempts, or a layer has no variant left
        """
        artwork = self.unique_slots.get(index)
        if artwork is not None:
            logger.debug(f"[Composer] index {index} is unique slot '{artwork.name}'")
            if self.surface is not None:
                self.surface.clear()
                self.surface.fill(artwork.drawable)
            return Composition(
                index=index,
                attributes={},
                unique_artwork=artwork,
            )

        attempts = 0
        while True:
            attempts += 1
            if attempts > self.max_attempts:
                raise GenerationExhausted(
                    f"Over {self.max_attempts} attempts to generate a new item at "
                    f"index {index} have failed; the layer space is too small for "
                    f"the requested collection size",
                    index=index,
                    attempts=attempts - 1,
                )

            selected = [(layer.key, self._draw_variant(layer.key)) for layer in self.catalog]
            digest = fingerprint([variant.name for _, variant in selected])
            if digest not in self.accepted:
                break
            logger.debug(f"[Composer] index {index} attempt {attempts} collided, redrawing")

        return self._accept(index, selected, digest, attempts)

    def _draw_variant(self, key: str) -> VariantAsset:
        layer = self.catalog.get(key)
        if layer.available_count() == 0:
            raise GenerationExhausted(
                f"Every variant of layer '{key}' has reached its usage cap"
            )

        count = len(layer.variants)
        for _ in range(MAX_VARIANT_REDRAWS):
            variant = layer.variants[self.sequencer.next_index(count)]
            if variant.is_available:
                return variant
            logger.debug(f"[Composer] '{key}/{variant.name}' is capped, redrawing")

        raise GenerationExhausted(
            f"Could not draw an available variant for layer '{key}' "
            f"after {MAX_VARIANT_REDRAWS} redraws"
        )

    def _accept(
        self,
        index: int,
        selected: list[tuple[str, VariantAsset]],
        digest: str,
        attempts: int,
    ) -> Composition:
        self.accepted.add(digest)
        attributes: dict[str, Any] = {}
        for key, variant in selected:
            variant.used_count += 1
            attributes[key] = variant.name

        if self.surface is not None:
            self.surface.clear()
            for _, variant in selected:
                self.surface.fill(variant.drawable)

        return Composition(
            index=index,
            selected=selected,
            attributes=attributes,
            content_fingerprint=digest,
            attempts=attempts,
        )
