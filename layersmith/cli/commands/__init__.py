"""CLI commands for layersmith."""

from . import (
    generate,
    rarity,
    gif,
    variation,
    validate,
)

__all__ = [
    "generate",
    "rarity",
    "gif",
    "variation",
    "validate",
]
