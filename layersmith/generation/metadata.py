"""Assemble finalized items and their metadata records.

The ``dna`` of an item is ``sha256(fingerprint + sha256(attributes_json))``
where ``attributes_json`` is the compact JSON form of the ``{trait_type,
value}`` list. Unique-slot items have no content fingerprint; they use
``sha256("1of1:" + artwork_name)`` in its place.
"""

import json
from typing import Any

from ..core.models import GeneratedItem, MetadataRecord, MetadataTemplate, TraitAttribute
from .composer import Composition, sha256_hex


UNIQUE_PLACEHOLDER_PREFIX = "1of1:"


def normalize_value(value: Any) -> Any:
    """Integral floats become ints, matching how they are written to JSON."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def attribute_list(attributes: dict[str, Any]) -> list[dict[str, Any]]:
    """Ordered ``{trait_type, value}`` pairs in insertion order."""
    return [
        {"trait_type": key, "value": normalize_value(value)}
        for key, value in attributes.items()
    ]


def serialize_attributes(attributes: dict[str, Any]) -> str:
    return json.dumps(attribute_list(attributes), separators=(",", ":"), ensure_ascii=False)


def unique_placeholder(artwork_name: str) -> str:
    return sha256_hex(UNIQUE_PLACEHOLDER_PREFIX + artwork_name)


def compute_dna(
    content_fingerprint: str | None,
    attributes: dict[str, Any],
    unique_artwork: str | None = None,
) -> str:
    """Derive an item's dna from its fingerprint (or placeholder) and attributes."""
    if content_fingerprint is None:
        if unique_artwork is None:
            raise ValueError("dna needs either a content fingerprint or a unique artwork")
        content_fingerprint = unique_placeholder(unique_artwork)
    return sha256_hex(content_fingerprint + sha256_hex(serialize_attributes(attributes)))


def recompute_dna(item: GeneratedItem) -> str:
    """Recompute dna from a stored item; equals ``item.dna`` when intact."""
    return compute_dna(item.content_fingerprint, item.attributes, item.unique_artwork)


class MetadataBuilder:
    """Turns compositions into items and items into metadata records.

    Args:
        template: Name prefix, description and URL templates
        image_format: File extension of rendered images (``png`` or ``jpg``)
    """

    def __init__(self, template: MetadataTemplate | None = None, image_format: str = "png") -> None:
        self.template = template or MetadataTemplate()
        self.image_format = image_format

    def build_item(self, composition: Composition) -> GeneratedItem:
        unique_name = composition.unique_artwork.name if composition.unique_artwork else None
        attributes = dict(composition.attributes)
        return GeneratedItem(
            index=composition.index,
            selected_variants=composition.variant_names,
            attributes=attributes,
            content_fingerprint=composition.content_fingerprint,
            unique_artwork=unique_name,
            dna=compute_dna(composition.content_fingerprint, attributes, unique_name),
        )

    def build_record(self, item: GeneratedItem) -> MetadataRecord:
        edition = item.edition
        image = ""
        if self.template.image_base_uri:
            image = f"{self.template.image_base_uri.rstrip('/')}/{edition}.{self.image_format}"
        external_url = self.template.external_url.replace("{edition}", str(edition))

        return MetadataRecord(
            name=f"{self.template.name_prefix}#{edition}",
            description=self.template.description,
            image=image,
            external_url=external_url,
            attributes=[TraitAttribute(**pair) for pair in attribute_list(item.attributes)],
            dna=item.dna,
        )
