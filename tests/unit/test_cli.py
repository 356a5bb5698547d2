# tests/unit/test_cli.py
"""
Tests for the ike CLI.
"""

from __future__ import annotations

import json
import logging

import pytest
import yaml
from typer.testing import CliRunner

from ike.cli.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def write_config(tmp_path, vectors_file):
    path = tmp_path / "ike.yaml"
    config = {"similarity": {"embeddings": [{"name": "colors", "path": str(vectors_file)}]}}
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


class TestConfigCommand:
    """Tests for ike config."""

    def test_shows_defaults_as_yaml(self):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["similarity"]["combination_strategy"] == "average"

    def test_json_output(self, tmp_path, color_vectors_file):
        result = runner.invoke(
            app, ["config", "--json", "-c", str(write_config(tmp_path, color_vectors_file))]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["similarity"]["embeddings"][0]["name"] == "colors"

    def test_missing_config_file(self, tmp_path):
        result = runner.invoke(app, ["config", "-c", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "not found" in result.output.lower()


class TestSimilarCommand:
    """Tests for ike similar."""

    def test_single_phrase(self, tmp_path, color_vectors_file):
        config = write_config(tmp_path, color_vectors_file)

        result = runner.invoke(app, ["similar", "red", "-c", str(config), "-n", "2"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == ["1.0000\tred", "0.9939\tdark red"]

    def test_several_phrases_use_centroid(self, tmp_path, color_vectors_file):
        config = write_config(tmp_path, color_vectors_file)

        result = runner.invoke(app, ["similar", "red", "blue", "-c", str(config), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["phrase"] == "purple"

    def test_unknown_phrase(self, tmp_path, color_vectors_file):
        config = write_config(tmp_path, color_vectors_file)

        result = runner.invoke(app, ["similar", "teal", "-c", str(config)])

        assert result.exit_code == 0
        assert "No similar phrases found." in result.output

    def test_no_embeddings_configured(self):
        result = runner.invoke(app, ["similar", "red"])

        assert result.exit_code == 1
        assert "No embedding sources" in result.output


class TestLoggingLevel:
    """The configured log level applies once a command has loaded its config."""

    def test_configured_level_applied(self, tmp_path):
        path = tmp_path / "ike.yaml"
        path.write_text(yaml.safe_dump({"logging": {"level": "debug"}}), encoding="utf-8")

        result = runner.invoke(app, ["config", "-c", str(path)])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_verbose_overrides_configured_level(self, tmp_path):
        path = tmp_path / "ike.yaml"
        path.write_text(yaml.safe_dump({"logging": {"level": "ERROR"}}), encoding="utf-8")

        result = runner.invoke(app, ["--verbose", "config", "-c", str(path)])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_similar_applies_configured_level(self, tmp_path, color_vectors_file):
        path = tmp_path / "ike.yaml"
        config = {
            "similarity": {"embeddings": [{"name": "colors", "path": str(color_vectors_file)}]},
            "logging": {"level": "ERROR"},
        }
        path.write_text(yaml.safe_dump(config), encoding="utf-8")

        result = runner.invoke(app, ["similar", "red", "-c", str(path)])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR
