"""Wiring for a playable game: settings, logging, leaderboard and controller."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from memory_match.controller.game import GameController
from memory_match.controller.leaderboard import LeaderboardController
from memory_match.controller.settings import AppSettings
from memory_match.logic.session import GameSession
from shared.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import Callable

    from memory_match.leaderboard.models import ScoreEntry
    from memory_match.logic.difficulty import Difficulty
    from memory_match.logic.events import SessionListener
    from memory_match.logic.settings import GameRules
    from memory_match.logic.themes import Theme

logger = structlog.get_logger()


def create_game(  # noqa: PLR0913
    settings: AppSettings,
    player_name: str,
    difficulty: Difficulty,
    theme: Theme,
    *,
    rules: GameRules | None = None,
    listener: SessionListener | None = None,
    on_game_over: Callable[[ScoreEntry | None], None] | None = None,
) -> GameController:
    """Build a session and its controller against the configured leaderboard file."""
    leaderboard = LeaderboardController(settings.leaderboard_path)
    session = GameSession(difficulty, theme, rules=rules, seed=settings.seed, listener=listener)
    logger.info(
        "game created",
        player=player_name,
        difficulty=difficulty,
        theme=theme,
        seeded=settings.seed is not None,
    )
    return GameController(session, player_name, leaderboard, on_game_over)


def get_game(
    player_name: str,
    difficulty: Difficulty,
    theme: Theme,
    listener: SessionListener | None = None,
) -> GameController:  # pragma: no cover
    """Entry point for a front end: read MEMORY_* settings and set up logging first."""
    settings = AppSettings()
    setup_logging(log_dir=settings.log_dir)
    return create_game(settings, player_name, difficulty, theme, listener=listener)
