"""Rarity reporting for generated collections."""

from .calculator import (
    SEPARATOR,
    calculate_rarities,
    format_value,
    normalize_exclusions,
    rarity_key,
    trait_coverage,
)

__all__ = [
    "SEPARATOR",
    "calculate_rarities",
    "format_value",
    "normalize_exclusions",
    "rarity_key",
    "trait_coverage",
]
