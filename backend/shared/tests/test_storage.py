"""Tests for the per-user data directory and atomic file writes."""

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from shared.storage import APP_DIR_NAME, atomic_write_text, default_data_dir


class TestDefaultDataDir:
    def test_home_directory_on_posix(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        with patch("shared.storage.os") as mock_os:
            mock_os.name = "posix"
            mock_os.environ = {"APPDATA": "/ignored"}
            assert default_data_dir() == tmp_path / APP_DIR_NAME

    def test_appdata_on_windows(self, tmp_path):
        with patch("shared.storage.os") as mock_os:
            mock_os.name = "nt"
            mock_os.environ = {"APPDATA": str(tmp_path)}
            assert default_data_dir() == Path(tmp_path) / APP_DIR_NAME

    def test_windows_without_appdata_falls_back_to_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        with patch("shared.storage.os") as mock_os:
            mock_os.name = "nt"
            mock_os.environ = {}
            assert default_data_dir() == tmp_path / APP_DIR_NAME

class TestAtomicWriteText:
    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "leaderboard.dat"

        atomic_write_text(target, "{}")

        assert target.read_text(encoding="utf-8") == "{}"

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "leaderboard.dat"

        atomic_write_text(target, "first")
        atomic_write_text(target, "second")

        assert target.read_text(encoding="utf-8") == "second"

    def test_accepts_string_path(self, tmp_path):
        atomic_write_text(str(tmp_path / "scores.json"), "[]")
        assert (tmp_path / "scores.json").exists()

    def test_writes_utf8(self, tmp_path):
        target = tmp_path / "leaderboard.dat"
        atomic_write_text(target, '{"player_name": "ゆうき"}')
        assert target.read_text(encoding="utf-8") == '{"player_name": "ゆうき"}'

    def test_file_is_owner_only(self, tmp_path):
        target = tmp_path / "leaderboard.dat"

        atomic_write_text(target, "data")

        assert stat.S_IMODE(target.stat().st_mode) == 0o600

    def test_parent_is_a_file_raises_oserror(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(OSError):
            atomic_write_text(blocker / "leaderboard.dat", "data")


class TestAtomicWriteTextErrorHandling:
    def test_fsync_failure_keeps_previous_file(self, tmp_path):
        target = tmp_path / "leaderboard.dat"
        atomic_write_text(target, "previous")

        with (
            patch("os.fsync", side_effect=OSError("fsync failure")),
            pytest.raises(OSError, match="fsync failure"),
        ):
            atomic_write_text(target, "replacement")

        assert target.read_text(encoding="utf-8") == "previous"
        assert list(tmp_path.glob(".leaderboard.dat_*.tmp")) == []

    def test_fdopen_failure_closes_fd_and_removes_temp(self, tmp_path):
        target = tmp_path / "leaderboard.dat"

        with (
            patch("os.fdopen", side_effect=OSError("fdopen failure")) as mock_fdopen,
            patch("os.close", wraps=os.close) as mock_close,
            pytest.raises(OSError, match="fdopen failure"),
        ):
            atomic_write_text(target, "content")

        mock_close.assert_called_once_with(mock_fdopen.call_args[0][0])
        assert not target.exists()
        assert list(tmp_path.glob(".leaderboard.dat_*.tmp")) == []

    def test_no_double_close_after_fdopen_takes_ownership(self, tmp_path):
        with (
            patch("os.fsync", side_effect=OSError("fsync failure")),
            patch("os.close") as mock_close,
            pytest.raises(OSError, match="fsync failure"),
        ):
            atomic_write_text(tmp_path / "leaderboard.dat", "content")

        mock_close.assert_not_called()
