"""Generated item, metadata record and rarity report models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GeneratedItem(BaseModel):
    """One finalized collection member.

    Composition-path items carry a ``content_fingerprint``; unique-slot items
    carry ``unique_artwork`` instead and have no fingerprint.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    selected_variants: list[tuple[str, str]] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)
    content_fingerprint: str | None = None
    unique_artwork: str | None = None
    dna: str

    @property
    def edition(self) -> int:
        """1-based edition number used in names and file paths."""
        return self.index + 1

    @property
    def is_unique(self) -> bool:
        return self.unique_artwork is not None


class TraitAttribute(BaseModel):
    """A ``{trait_type, value}`` pair as written to metadata files."""

    trait_type: str
    value: Any


class MetadataRecord(BaseModel):
    """Per-item metadata record in the persisted schema."""

    name: str
    description: str = ""
    image: str = ""
    external_url: str = ""
    attributes: list[TraitAttribute] = Field(default_factory=list)
    dna: str = ""


class RarityEntry(BaseModel):
    """One line of the rarity report: ``Type::Value`` and its count."""

    attribute: str
    value: int
