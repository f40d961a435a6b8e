"""Deterministic generation engine.

Pipeline (per run):
    Step 0: DeterministicSequencer(seed) - One shared random stream
    Step 1: plan_unique_slots() - Reserve indices for 1-of-1 artworks
    Step 2: CompositionEngine.compose_item() - Unique layer combination per index
    Step 3: TraitAssigner.assign() - Roll auxiliary traits (two draws each)
    Step 4: MetadataBuilder - Finalize item, dna and metadata record

generate_collection() runs the whole pipeline in ascending index order.
"""

from .sequencer import ALGORITHM, DeterministicSequencer
from .catalog import LayerCatalog
from .planner import plan_unique_slots
from .composer import (
    MAX_ATTEMPTS,
    Composition,
    CompositionEngine,
    fingerprint,
)
from .traits import TraitAssigner, resolve_value, round_half_up
from .metadata import (
    MetadataBuilder,
    attribute_list,
    compute_dna,
    recompute_dna,
    serialize_attributes,
    unique_placeholder,
)
from .core import (
    GenerationResult,
    GenerationStats,
    ItemSink,
    generate_collection,
)

__all__ = [
    # Sequencer
    "ALGORITHM",
    "DeterministicSequencer",
    # Catalog / planner
    "LayerCatalog",
    "plan_unique_slots",
    # Composition
    "MAX_ATTEMPTS",
    "Composition",
    "CompositionEngine",
    "fingerprint",
    # Traits
    "TraitAssigner",
    "resolve_value",
    "round_half_up",
    # Metadata
    "MetadataBuilder",
    "attribute_list",
    "compute_dna",
    "recompute_dna",
    "serialize_attributes",
    "unique_placeholder",
    # Orchestration
    "GenerationResult",
    "GenerationStats",
    "ItemSink",
    "generate_collection",
]
