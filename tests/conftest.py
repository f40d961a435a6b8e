"""Global fixtures for layersmith tests."""

import json
from pathlib import Path

import pytest
from PIL import Image

from layersmith.core.models import (
    DiscreteSet,
    NumericRange,
    TraitSpec,
    UniqueArtwork,
    VariantAsset,
)
from layersmith.core.rendering import DrawableSurface
from layersmith.generation import LayerCatalog


class RecordingSurface(DrawableSurface):
    """Surface that records draw calls instead of painting."""

    def __init__(self, width: int = 10, height: int = 10) -> None:
        super().__init__(width, height)
        self.calls = []
        self.drawn = []

    def clear(self) -> None:
        self.calls.append(("clear",))
        self.drawn = []

    def draw_image(self, drawable, x, y, w, h) -> None:
        self.calls.append(("draw", drawable, x, y, w, h))
        self.drawn.append(drawable)

    def encode(self, fmt: str = "png") -> bytes:
        return ("|".join(str(d) for d in self.drawn)).encode()


def build_catalog(layers: dict[str, list[str]]) -> LayerCatalog:
    """Catalog from ``{layer: [file names]}``; drawables are ``layer/name`` strings."""
    groups = {
        key: [VariantAsset.from_filename(name, drawable=f"{key}/{name}") for name in names]
        for key, names in layers.items()
    }
    return LayerCatalog.from_groups(list(layers.keys()), groups)


SAMPLE_LAYERS = {
    "background": ["blue.png", "green.png", "red.png"],
    "body": ["round.png", "square.png", "tall.png", "wide.png"],
    "eyes": ["closed.png", "laser#1.png", "open.png"],
}


@pytest.fixture
def sample_layers():
    return dict(SAMPLE_LAYERS)


@pytest.fixture
def make_catalog():
    """Factory for fresh catalogs (usage counters are mutated by generation)."""
    return build_catalog


@pytest.fixture
def sample_catalog():
    """Three layers, 36 combinations, one variant capped at a single use."""
    return build_catalog(SAMPLE_LAYERS)


@pytest.fixture
def sample_traits():
    return [
        TraitSpec(key="level", chance=5, kind=NumericRange(min=1, max=10, precision=0)),
        TraitSpec(key="speed", chance=20, kind=NumericRange(min=0, max=2.5, precision=1)),
        TraitSpec(key="mood", chance=20, kind=DiscreteSet(values=["calm", "wild", "sleepy"])),
    ]


@pytest.fixture
def unique_artworks():
    return [
        UniqueArtwork(name="golden", drawable="1of1s/golden"),
        UniqueArtwork(name="glitch", drawable="1of1s/glitch"),
    ]


@pytest.fixture
def recording_surface():
    return RecordingSurface()


def _write_png(path: Path, color: tuple[int, int, int, int]) -> None:
    Image.new("RGBA", (8, 8), color).save(path)


@pytest.fixture
def make_project(tmp_path):
    """Write a project directory with tiny PNG layers and a config file."""

    def _make(
        layers: dict[str, list[str]] | None = None,
        config: dict | None = None,
        uniques: list[str] | None = None,
        config_name: str = "metacreator.json",
    ) -> Path:
        root = tmp_path / "project"
        root.mkdir()
        layers = layers if layers is not None else SAMPLE_LAYERS

        for i, (layer, files) in enumerate(layers.items()):
            directory = root / layer
            directory.mkdir()
            for j, name in enumerate(files):
                _write_png(directory / name, (40 * i % 256, 30 * j % 256, 100, 255))

        if uniques:
            directory = root / "1of1s"
            directory.mkdir()
            for j, name in enumerate(uniques):
                _write_png(directory / name, (255, 215, 10 * j, 255))

        data = config if config is not None else {
            "layers": {name: {} for name in layers},
            "size": 12,
            "seed": 42,
            "png": True,
            "output": {"width": 16, "height": 16},
            "metadata": {"namePrefix": "Critter ", "description": "Test critters"},
            "traits": {
                "level": {"chance": 6, "range": [1, 10]},
                "mood": {"chance": 12, "values": ["calm", "wild"]},
            },
        }
        (root / config_name).write_text(json.dumps(data), encoding="utf-8")
        return root

    return _make
