"""Unit tests for environment-driven application settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from memory_match.controller.settings import AppSettings
from shared.storage import APP_DIR_NAME


class TestAppSettings:
    def test_reads_prefixed_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MEMORY_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("MEMORY_LEADERBOARD_FILE", "scores.json")

        settings = AppSettings()

        assert settings.data_dir == tmp_path
        assert settings.leaderboard_path == tmp_path / "scores.json"

    def test_default_data_dir_under_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("MEMORY_DATA_DIR", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        settings = AppSettings()

        assert settings.data_dir == Path(tmp_path) / APP_DIR_NAME
        assert settings.leaderboard_path.name == "leaderboard.dat"

    def test_accepts_valid_seed(self, monkeypatch):
        seed = "0f" * 32
        monkeypatch.setenv("MEMORY_SEED", seed)
        assert AppSettings().seed == seed

    def test_rejects_malformed_seed(self, monkeypatch):
        monkeypatch.setenv("MEMORY_SEED", "not-hex")
        with pytest.raises(ValidationError, match="64 hex characters"):
            AppSettings()

    def test_seed_unset_by_default(self, monkeypatch):
        monkeypatch.delenv("MEMORY_SEED", raising=False)
        assert AppSettings().seed is None
