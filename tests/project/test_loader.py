"""Tests for project loading and collection persistence."""

import json

import pytest
from PIL import Image

from layersmith.core.errors import ConfigError
from layersmith.core.models import DiscreteSet, NumericRange, ProjectConfig, literal_decimals
from layersmith.core.rendering import PillowSurface
from layersmith.generation import generate_collection
from layersmith.project import (
    CollectionWriter,
    load_config,
    load_project,
    load_records,
    save_rarities,
)
from layersmith.rarity import calculate_rarities


class TestLoadProject:
    """Tests for load_project."""

    def test_loads_layers_in_config_order(self, make_project):
        root = make_project()
        project = load_project(root)

        assert project.catalog.keys == ["background", "body", "eyes"]
        eyes = project.catalog.get("eyes")
        assert [v.name for v in eyes.variants] == ["closed", "laser", "open"]
        assert eyes.variants[1].max_uses == 1
        assert isinstance(eyes.variants[0].drawable, Image.Image)
        assert project.output_dir == root / "outputs"

    def test_skip_image_decoding(self, make_project):
        project = load_project(make_project(), load_images=False)
        assert all(v.drawable is None for layer in project.catalog for v in layer.variants)

    def test_hidden_files_ignored(self, make_project):
        root = make_project()
        (root / "background" / ".DS_Store").write_bytes(b"junk")
        project = load_project(root, load_images=False)
        assert len(project.catalog.get("background").variants) == 3

    def test_unique_artworks(self, make_project):
        root = make_project(uniques=["b_golden.png", "a_glitch.png"])
        project = load_project(root)
        assert [a.name for a in project.unique_artworks] == ["a_glitch", "b_golden"]

    def test_missing_config(self, tmp_path):
        with pytest.raises(ConfigError, match="metacreator.json"):
            load_project(tmp_path)

    def test_missing_project_dir(self, tmp_path):
        with pytest.raises(ConfigError):
            load_project(tmp_path / "nope")

    def test_missing_layer_directory(self, make_project):
        root = make_project(config={"layers": {"background": {}, "hats": {}}, "size": 3})
        with pytest.raises(ConfigError, match='Layer "hats" does not have a directory'):
            load_project(root)

    def test_yaml_config(self, make_project):
        root = make_project(config_name="metacreator.yaml")
        project = load_project(root, load_images=False)
        assert project.config.size == 12


class TestLoadConfig:
    """Tests for config validation."""

    def _write(self, tmp_path, data, name="metacreator.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return path

    def test_defaults(self, tmp_path):
        config = load_config(self._write(tmp_path, {"layers": ["a"]}))
        assert config.size == 10000
        assert config.seed is None
        assert config.image_format == "jpg"
        assert (config.output.width, config.output.height) == (500, 500)
        assert config.output.path == "outputs"

    @pytest.mark.parametrize("size", [0, -3, "100", 1.5, True])
    def test_invalid_size(self, tmp_path, size):
        with pytest.raises(ConfigError, match="size"):
            load_config(self._write(tmp_path, {"layers": ["a"], "size": size}))

    def test_layers_required(self, tmp_path):
        with pytest.raises(ConfigError, match="Layers not specified"):
            load_config(self._write(tmp_path, {"size": 10}))

    def test_malformed_json(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(self._write(tmp_path, "{not json"))

    def test_traits(self, tmp_path):
        data = {
            "layers": ["a"],
            "traits": {
                "level": {"chance": 100, "range": [1, 10]},
                "speed": {"chance": 50, "range": [0, 2.25]},
                "mood": {"chance": 10, "values": ["calm", "wild"]},
            },
        }
        specs = load_config(self._write(tmp_path, data)).trait_specs()

        assert [s.key for s in specs] == ["level", "speed", "mood"]
        assert specs[0].kind == NumericRange(min=1, max=10, precision=0)
        assert specs[1].kind.precision == 2
        assert isinstance(specs[2].kind, DiscreteSet)

    def test_small_range_precision(self, tmp_path):
        data = {"layers": ["a"], "traits": {"drift": {"chance": 1, "range": [0, 0.00005]}}}
        (spec,) = load_config(self._write(tmp_path, data)).trait_specs()
        assert spec.kind.precision == 5

    @pytest.mark.parametrize(
        "trait",
        [
            {"chance": 1},
            {"chance": 1, "range": [1, 2], "values": ["a"]},
            {"chance": 1, "range": [1]},
            {"chance": 1, "range": [1, "x"]},
        ],
    )
    def test_invalid_traits(self, tmp_path, trait):
        with pytest.raises(ConfigError):
            load_config(self._write(tmp_path, {"layers": ["a"], "traits": {"t": trait}}))

    def test_duplicate_layers(self):
        with pytest.raises(ValueError):
            ProjectConfig(layers=["a", "a"])

    @pytest.mark.parametrize(
        "value,expected",
        [(10, 0), (2.5, 1), (3.0, 0), (0.125, 3), (5e-05, 5), (0.0001, 4), ("2.50", 2), ("7", 0)],
    )
    def test_literal_decimals(self, value, expected):
        assert literal_decimals(value) == expected


class TestCollectionWriter:
    """Tests for persisting a generated collection."""

    def test_writes_images_and_records(self, make_project, tmp_path):
        project = load_project(make_project())
        config = project.config
        writer = CollectionWriter(project.output_dir, config.image_format)

        result = generate_collection(
            project.catalog,
            config.size,
            seed=config.seed,
            traits=config.trait_specs(),
            template=config.metadata,
            image_format=config.image_format,
            surface=PillowSurface(config.output.width, config.output.height),
            sink=writer,
        )

        assert writer.written == 12
        image_path = project.output_dir / "images" / "1.png"
        with Image.open(image_path) as img:
            assert img.size == (16, 16)

        stored = json.loads((project.output_dir / "jsons" / "3.json").read_text())
        assert stored["name"] == "Critter #3"
        assert stored["dna"] == result.items[2].dna

        records = load_records(project.output_dir / "jsons")
        assert len(records) == 12

        report = save_rarities(calculate_rarities(records), tmp_path / "rarities.json")
        entries = json.loads(report.read_text())
        assert set(entries[0]) == {"attribute", "value"}

    def test_load_records_rejects_garbage(self, tmp_path):
        (tmp_path / "1.json").write_text("[1, 2]")
        with pytest.raises(ConfigError):
            load_records(tmp_path)
