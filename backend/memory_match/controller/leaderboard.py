"""Leaderboard facade used by menus and the game-over flow."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from memory_match.leaderboard.board import Leaderboard
from memory_match.leaderboard.exceptions import LeaderboardCorruptError, LeaderboardUnavailableError
from memory_match.leaderboard.models import ScoreEntry

if TYPE_CHECKING:
    from memory_match.logic.difficulty import Difficulty

logger = structlog.get_logger()


class LeaderboardController:
    """
    Own the leaderboard for one installation.

    Loads once at construction and saves after every mutation. A corrupt
    file is logged and the board starts empty; the file itself is left alone
    until the next successful save overwrites it. Save failures are logged
    and re-raised; the in-memory board keeps the new state regardless.
    """

    def __init__(self, path: Path | str, leaderboard: Leaderboard | None = None) -> None:
        self._path = Path(path)
        self._leaderboard = leaderboard if leaderboard is not None else Leaderboard()
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def show(self) -> tuple[ScoreEntry, ...]:
        """Current ranked entries for display."""
        return self._leaderboard.entries

    def qualifies(self, score: int) -> bool:
        return self._leaderboard.qualifies(score)

    def add_score(self, player_name: str | None, score: int, difficulty: Difficulty, level: int) -> ScoreEntry:
        entry = ScoreEntry.create(player_name, score, difficulty, level)
        self._leaderboard.add_entry(entry)
        logger.info(
            "score recorded",
            player=entry.player_name,
            score=entry.score,
            difficulty=entry.difficulty,
            game_level=entry.level,
        )
        self._save()
        return entry

    def clear_board(self) -> None:
        self._leaderboard.clear()
        logger.info("leaderboard cleared")
        self._save()

    def _load(self) -> None:
        try:
            self._leaderboard.load(self._path)
        except LeaderboardCorruptError:
            logger.exception("leaderboard load failed, starting empty", path=str(self._path))

    def _save(self) -> None:
        try:
            self._leaderboard.save(self._path)
        except LeaderboardUnavailableError:
            logger.exception("leaderboard save failed", path=str(self._path))
            raise
