"""Load a project directory: config file, layer folders and 1-of-1 artworks."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.errors import ConfigError
from ..core.models import ProjectConfig, UniqueArtwork, VariantAsset
from ..core.rendering import load_image
from ..generation.catalog import LayerCatalog


logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("metacreator.json", "metacreator.yaml", "metacreator.yml")
UNIQUES_DIRNAME = "1of1s"


@dataclass
class Project:
    """Everything needed to run generation for one project directory."""

    root: Path
    config: ProjectConfig
    catalog: LayerCatalog
    unique_artworks: list[UniqueArtwork] = field(default_factory=list)

    @property
    def output_dir(self) -> Path:
        return self.root / self.config.output.path


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue["loc"]) or "config"
        lines.append(f"{location}: {issue['msg']}")
    return "; ".join(lines)


def find_config_file(root: Path) -> Path:
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    raise ConfigError(f"This directory does not have a '{CONFIG_FILENAMES[0]}' file.")


def load_config(path: Path) -> ProjectConfig:
    """Parse and validate a config file (JSON or YAML).

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config '{path}': {e}") from e

    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid config '{path.name}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config '{path.name}' must be a mapping")
    if "layers" not in data:
        raise ConfigError("Layers not specified in meta json")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config '{path.name}': {_format_validation_error(e)}") from e


def _asset_files(directory: Path) -> list[Path]:
    """Visible regular files, sorted by name."""
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and not p.name.startswith(".")),
        key=lambda p: p.name,
    )


def load_layer_variants(directory: Path, load_images: bool = True) -> list[VariantAsset]:
    variants = []
    for path in _asset_files(directory):
        drawable = load_image(path) if load_images else None
        variants.append(VariantAsset.from_filename(path.name, drawable=drawable))
    return variants


def load_catalog(root: Path, config: ProjectConfig, load_images: bool = True) -> LayerCatalog:
    """Build the layer catalog from ``root/<layer>`` directories.

    Raises:
        ConfigError: If a configured layer has no directory or no files
    """
    groups = {}
    for layer in config.layers:
        directory = root / layer
        if not directory.is_dir():
            raise ConfigError(f'Layer "{layer}" does not have a directory')
        groups[layer] = load_layer_variants(directory, load_images)
        logger.info(f"[Loader] layer '{layer}': {len(groups[layer])} variants")
    return LayerCatalog.from_groups(config.layers, groups)


def load_unique_artworks(root: Path, load_images: bool = True) -> list[UniqueArtwork]:
    """Load 1-of-1 artworks from ``root/1of1s``; an absent folder means none."""
    directory = root / UNIQUES_DIRNAME
    if not directory.is_dir():
        return []
    artworks = []
    for path in _asset_files(directory):
        drawable = load_image(path) if load_images else None
        artworks.append(UniqueArtwork(name=path.name.split(".")[0], drawable=drawable))
    logger.info(f"[Loader] {len(artworks)} unique artworks")
    return artworks


def load_project(root: Path, load_images: bool = True) -> Project:
    """Load config, catalog and unique artworks from a project directory.

    Args:
        root: Project directory
        load_images: Decode image files; dry runs can skip this

    Raises:
        ConfigError: On any missing or invalid configuration
    """
    root = Path(root)
    if not root.is_dir():
        raise ConfigError(f"Project directory '{root}' does not exist")

    config = load_config(find_config_file(root))
    catalog = load_catalog(root, config, load_images)
    artworks = load_unique_artworks(root, load_images)
    return Project(root=root, config=config, catalog=catalog, unique_artworks=artworks)
