"""Data models for layersmith.

This package contains all Pydantic models used across the system:
- assets.py: Variants, layers and 1-of-1 artworks
- traits.py: Auxiliary trait specs (numeric ranges, discrete sets)
- collection.py: Generated items, metadata records, rarity entries
- config.py: Project configuration (metacreator.json)
"""

from .assets import (
    VariantAsset,
    LayerDefinition,
    UniqueArtwork,
)
from .traits import (
    NumericRange,
    DiscreteSet,
    TraitKind,
    TraitSpec,
)
from .collection import (
    GeneratedItem,
    TraitAttribute,
    MetadataRecord,
    RarityEntry,
)
from .config import (
    DEFAULT_SIZE,
    OutputConfig,
    MetadataTemplate,
    TraitConfig,
    ProjectConfig,
    literal_decimals,
)

__all__ = [
    # Assets
    "VariantAsset",
    "LayerDefinition",
    "UniqueArtwork",
    # Traits
    "NumericRange",
    "DiscreteSet",
    "TraitKind",
    "TraitSpec",
    # Collection
    "GeneratedItem",
    "TraitAttribute",
    "MetadataRecord",
    "RarityEntry",
    # Config
    "DEFAULT_SIZE",
    "OutputConfig",
    "MetadataTemplate",
    "TraitConfig",
    "ProjectConfig",
    "literal_decimals",
]
