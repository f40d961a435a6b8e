"""CLI smoke tests using typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from layersmith.cli.app import app
from layersmith.cli.commands.generate import parse_seed

runner = CliRunner()


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate_writes_collection(self, make_project):
        root = make_project()
        result = runner.invoke(app, ["generate", str(root)])

        assert result.exit_code == 0, result.output
        assert "Generated 12 items" in result.output
        assert (root / "outputs" / "images" / "12.png").exists()
        assert (root / "outputs" / "jsons" / "12.json").exists()

    def test_default_command_uses_cwd(self, make_project, monkeypatch):
        root = make_project()
        monkeypatch.chdir(root)
        result = runner.invoke(app, [])

        assert result.exit_code == 0, result.output
        assert (root / "outputs" / "jsons" / "1.json").exists()

    def test_seed_override_is_reproducible(self, make_project):
        root = make_project()
        runner.invoke(app, ["generate", str(root), "--seed", "abc"])
        first = (root / "outputs" / "jsons" / "5.json").read_text()
        runner.invoke(app, ["generate", str(root), "--seed", "abc"])
        assert (root / "outputs" / "jsons" / "5.json").read_text() == first

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["generate", str(tmp_path)])
        assert result.exit_code == 1
        assert "metacreator.json" in result.output

    def test_exhausted_space(self, make_project):
        root = make_project(
            layers={"background": ["red#0.png", "blue#2.png"]},
            config={"layers": ["background"], "size": 5, "seed": 42},
        )
        result = runner.invoke(app, ["generate", str(root)])
        assert result.exit_code == 1
        assert "attempts" in result.output


class TestVariationCommand:
    """Tests for the dry-run test command."""

    def test_reports_rarities_without_writing(self, make_project, tmp_path):
        root = make_project()
        report = tmp_path / "rarities.json"
        result = runner.invoke(app, ["test", str(root), "--output", str(report)])

        assert result.exit_code == 0, result.output
        assert not (root / "outputs").exists()
        entries = json.loads(report.read_text())
        mood_total = sum(e["value"] for e in entries if e["attribute"].startswith("mood::"))
        assert mood_total == 12

    def test_dash_prefixed_seed_is_text(self, make_project, tmp_path):
        root = make_project()
        result = runner.invoke(
            app, ["test", str(root), "--seed=--5", "--output", str(tmp_path / "rarities.json")]
        )

        assert result.exit_code == 0, result.output
        assert "--5" in result.output

    def test_matches_persisted_run(self, make_project, tmp_path):
        root = make_project()
        runner.invoke(app, ["generate", str(root)])
        persisted_report = tmp_path / "persisted.json"
        runner.invoke(
            app, ["rarity", "--path", str(root / "outputs" / "jsons"), "--output", str(persisted_report)]
        )

        dry_report = tmp_path / "dry.json"
        runner.invoke(app, ["test", str(root), "--output", str(dry_report)])

        persisted = {e["attribute"]: e["value"] for e in json.loads(persisted_report.read_text())}
        dry = {e["attribute"]: e["value"] for e in json.loads(dry_report.read_text())}
        assert persisted == dry


class TestRarityCommand:
    """Tests for the rarity command."""

    def test_rarity_with_exclusions(self, tmp_path):
        jsons = tmp_path / "jsons"
        jsons.mkdir()
        for i, (bg, eyes) in enumerate([("red", "open"), ("red", "closed"), ("blue", "open")]):
            record = {
                "name": f"#{i + 1}",
                "attributes": [
                    {"trait_type": "Background", "value": bg},
                    {"trait_type": "Eyes", "value": eyes},
                ],
            }
            (jsons / f"{i + 1}.json").write_text(json.dumps(record))

        report = tmp_path / "rarities.json"
        result = runner.invoke(
            app, ["rarity", "--path", str(jsons), "--exclude", "eyes", "--output", str(report)]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(report.read_text()) == [
            {"attribute": "Background::red", "value": 2},
            {"attribute": "Background::blue", "value": 1},
        ]

    def test_rarity_missing_directory(self, tmp_path):
        result = runner.invoke(app, ["rarity", "--path", str(tmp_path / "missing")])
        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_project(self, make_project):
        result = runner.invoke(app, ["validate", str(make_project())])
        assert result.exit_code == 0, result.output
        assert "Project is valid" in result.output

    def test_space_too_small(self, make_project):
        root = make_project(
            layers={"background": ["red.png", "blue.png"]},
            config={"layers": ["background"], "size": 5},
        )
        result = runner.invoke(app, ["validate", str(root)])
        assert result.exit_code == 1
        assert "combinations" in result.output


class TestGifCommand:
    """Tests for the gif command."""

    def test_gif_from_generated_images(self, make_project, tmp_path):
        root = make_project()
        runner.invoke(app, ["generate", str(root)])
        output = tmp_path / "out.gif"

        result = runner.invoke(
            app,
            ["gif", "--path", str(root / "outputs" / "images"), "--output", str(output), "--size", "32"],
        )

        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_gif_without_frames(self, tmp_path):
        result = runner.invoke(app, ["gif", "--path", str(tmp_path)])
        assert result.exit_code == 1


class TestVersionFlag:
    """Test the --version flag."""

    def test_version_output(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "layersmith" in result.output


@pytest.mark.parametrize(
    "text,expected",
    [("42", 42), ("-5", -5), ("--5", "--5"), ("5-", "5-"), ("abc", "abc"), ("", "")],
)
def test_parse_seed(text, expected):
    assert parse_seed(text) == expected
