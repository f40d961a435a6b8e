"""Persist collections and rarity reports, and read metadata sets back."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..core.errors import ConfigError
from ..core.models import GeneratedItem, MetadataRecord, RarityEntry


logger = logging.getLogger(__name__)

RARITIES_FILENAME = "rarities.json"


def _write_json(path: Path, data) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=4, ensure_ascii=False)


class CollectionWriter:
    """Item sink that writes ``images/<n>.<ext>`` and ``jsons/<n>.json``.

    Args:
        output_dir: Collection output directory
        image_format: Extension for image files
    """

    def __init__(self, output_dir: Path, image_format: str = "png") -> None:
        self.output_dir = Path(output_dir)
        self.image_format = image_format
        self.images_dir = self.output_dir / "images"
        self.jsons_dir = self.output_dir / "jsons"
        self.images_dir.mkdir(parents=True, exist_ok=True)
        self.jsons_dir.mkdir(parents=True, exist_ok=True)
        self.written = 0

    def __call__(self, item: GeneratedItem, record: MetadataRecord, image: bytes | None) -> None:
        edition = item.edition
        if image is not None:
            (self.images_dir / f"{edition}.{self.image_format}").write_bytes(image)
        _write_json(self.jsons_dir / f"{edition}.json", record.model_dump(mode="json"))
        self.written += 1


def load_records(directory: Path) -> list[MetadataRecord]:
    """Read every ``*.json`` metadata record in ``directory``.

    Raises:
        ConfigError: If the directory is missing or a file is not a record
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ConfigError(f"Metadata directory '{directory}' does not exist")

    records = []
    for path in sorted(directory.glob("*.json")):
        try:
            with open(path, encoding="utf-8") as f:
                records.append(MetadataRecord.model_validate(json.load(f)))
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigError(f"Invalid metadata file '{path.name}': {e}") from e

    logger.info(f"[Writer] loaded {len(records)} records from {directory}")
    return records


def save_rarities(entries: list[RarityEntry], path: Path) -> Path:
    """Write the rarity report as ``[{attribute, value}]``."""
    path = Path(path)
    _write_json(path, [entry.model_dump() for entry in entries])
    return path
