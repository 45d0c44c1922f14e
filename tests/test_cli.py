"""Tests for the CLI."""

import json

import pytest
from click.testing import CliRunner

from fitness_coach.cli import main
from fitness_coach.config import GEMINI_KEY_ENV_VARS, get_settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CliRunner with an isolated data directory and no Gemini key."""
    monkeypatch.setenv("FITNESS_COACH_DATA_DIR", str(tmp_path / "data"))
    for var in GEMINI_KEY_ENV_VARS:
        monkeypatch.setenv(var, "")
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


@pytest.fixture
def profile_file(tmp_path, sample_user_profile):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(sample_user_profile.to_dict()))
    return path


class TestCli:
    """Tests for the plan lifecycle through the CLI."""

    def test_requires_init(self, runner):
        result = runner.invoke(main, ["show"])

        assert result.exit_code == 1
        assert "not initialized" in result.output

    def test_generate_show_export_regenerate(self, runner, profile_file, tmp_path):
        """Without a key the default plan is generated, saved and exported."""
        assert runner.invoke(main, ["init"]).exit_code == 0

        result = runner.invoke(main, ["generate", "--profile", str(profile_file)])
        assert result.exit_code == 0, result.output
        assert "using the default plan" in result.output

        result = runner.invoke(main, ["show"])
        assert "Goal: General Fitness" in result.output

        output = tmp_path / "plan.pdf"
        result = runner.invoke(main, ["export", "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_bytes().startswith(b"%PDF")

        assert runner.invoke(main, ["regenerate", "--yes"]).exit_code == 0
        result = runner.invoke(main, ["show"])
        assert result.exit_code == 1
        assert "No saved plan" in result.output

    def test_image_command(self, runner):
        result = runner.invoke(main, ["image", "Greek yogurt", "--type", "food"])

        assert result.exit_code == 0
        assert "delicious%20Greek%20yogurt" in result.output
