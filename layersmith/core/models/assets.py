"""Layer and variant asset models."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


_CAP_PATTERN = re.compile(r"^\d+")


class VariantAsset(BaseModel):
    """One concrete option within a layer.

    ``used_count`` only moves when the variant ends up in an accepted item.
    ``max_uses`` of 0 means unlimited.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    max_uses: int = Field(default=0, ge=0)
    used_count: int = Field(default=0, ge=0)
    drawable: Any = Field(default=None, exclude=True, repr=False)

    @property
    def is_capped(self) -> bool:
        return self.max_uses > 0

    @property
    def is_available(self) -> bool:
        """True while the variant may still be selected."""
        return not self.is_capped or self.used_count < self.max_uses

    @classmethod
    def from_filename(cls, filename: str, drawable: Any = None) -> "VariantAsset":
        """Build a variant from a file name like ``blue#2.png``.

        The name is everything before the first dot; the optional ``#`` suffix
        carries the usage cap. A suffix without leading digits means unlimited.
        """
        stem = filename.split(".")[0]
        name, _, cap = stem.partition("#")
        match = _CAP_PATTERN.match(cap)
        max_uses = int(match.group(0)) if match else 0
        return cls(name=name, max_uses=max_uses, drawable=drawable)


class LayerDefinition(BaseModel):
    """A named axis of variation with its ordered variants."""

    key: str
    variants: list[VariantAsset] = Field(default_factory=list)

    def available_count(self) -> int:
        return sum(1 for v in self.variants if v.is_available)


class UniqueArtwork(BaseModel):
    """A standalone 1-of-1 artwork that bypasses layer composition."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    drawable: Any = Field(default=None, exclude=True, repr=False)
