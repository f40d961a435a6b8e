"""Trait frequency aggregation over a finished collection."""

import logging
from collections import Counter
from typing import Any, Iterable

from ..core.models import MetadataRecord, RarityEntry


logger = logging.getLogger(__name__)

SEPARATOR = "::"


def format_value(value: Any) -> str:
    """Render a trait value the way it reads in the JSON metadata."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rarity_key(trait_type: str, value: Any) -> str:
    return f"{trait_type}{SEPARATOR}{format_value(value)}"


def normalize_exclusions(exclude: Iterable[str] | None) -> set[str]:
    """Lowercased, stripped, non-empty trait keys."""
    return {name.strip().lower() for name in exclude or () if name and name.strip()}


def calculate_rarities(
    records: Iterable[MetadataRecord],
    exclude: Iterable[str] | None = None,
) -> list[RarityEntry]:
    """Count every ``trait_type::value`` pair across the collection.

    Args:
        records: Metadata records of a completed collection
        exclude: Trait keys to skip, compared case-insensitively

    Returns:
        Entries sorted by descending count; ties keep first-seen order
    """
    excluded = normalize_exclusions(exclude)
    counts: Counter[str] = Counter()

    for record in records:
        for attr in record.attributes:
            if attr.trait_type.lower() in excluded:
                continue
            counts[rarity_key(attr.trait_type, attr.value)] += 1

    entries = [RarityEntry(attribute=key, value=count) for key, count in counts.items()]
    entries.sort(key=lambda entry: entry.value, reverse=True)
    logger.info(f"[Rarity] {len(entries)} distinct trait values")
    return entries


def trait_coverage(records: Iterable[MetadataRecord]) -> dict[str, int]:
    """Number of items carrying each trait key."""
    coverage: Counter[str] = Counter()
    for record in records:
        for trait_type in {attr.trait_type for attr in record.attributes}:
            coverage[trait_type] += 1
    return dict(coverage)
