"""Project directory adapters: loading inputs and persisting outputs."""

from .loader import (
    CONFIG_FILENAMES,
    UNIQUES_DIRNAME,
    Project,
    find_config_file,
    load_config,
    load_catalog,
    load_unique_artworks,
    load_project,
)
from .writer import (
    RARITIES_FILENAME,
    CollectionWriter,
    load_records,
    save_rarities,
)

__all__ = [
    # Loader
    "CONFIG_FILENAMES",
    "UNIQUES_DIRNAME",
    "Project",
    "find_config_file",
    "load_config",
    "load_catalog",
    "load_unique_artworks",
    "load_project",
    # Writer
    "RARITIES_FILENAME",
    "CollectionWriter",
    "load_records",
    "save_rarities",
]
