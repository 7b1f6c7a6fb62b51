"""
Asyncio driver for a game session.

The session only performs instantaneous transitions. This controller is the
external clock around it: a task that ticks the countdown once per interval,
and short delay tasks that flip a mismatched pair back, close the reveal
window and clear the hint highlight. On time expiry it stops the clock and
records the final score on the leaderboard.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from memory_match.leaderboard.exceptions import LeaderboardUnavailableError
from memory_match.logic.enums import MatchResult, PowerUpKind
from shared.logging import bind_log_context

if TYPE_CHECKING:
    from collections.abc import Callable

    from memory_match.controller.leaderboard import LeaderboardController
    from memory_match.leaderboard.models import ScoreEntry
    from memory_match.logic.session import GameSession

logger = structlog.get_logger()

MS_PER_SECOND = 1000


class GameController:
    """
    Drive one player's GameSession in real time.

    Must be used from within a running event loop. All session mutation
    happens on that loop, so the session never sees concurrent callers.
    """

    def __init__(
        self,
        session: GameSession,
        player_name: str,
        leaderboard: LeaderboardController | None = None,
        on_game_over: Callable[[ScoreEntry | None], None] | None = None,
    ) -> None:
        self._session = session
        self._player_name = player_name
        self._leaderboard = leaderboard
        self._on_game_over = on_game_over
        self._clock_task: asyncio.Task[None] | None = None
        self._delayed_tasks: set[asyncio.Task[None]] = set()
        self._game_over = False

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def running(self) -> bool:
        return self._clock_task is not None and not self._clock_task.done()

    @property
    def game_over(self) -> bool:
        return self._game_over

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start (or restart) the once-per-interval countdown."""
        self._stop_clock()
        bind_log_context(player=self._player_name, difficulty=self._session.difficulty, theme=self._session.theme)
        self._clock_task = asyncio.create_task(self._run_clock())

    def stop(self) -> None:
        """Stop the clock and drop every pending delayed action."""
        self._stop_clock()
        self._cancel_delayed()

    def next_level(self) -> int:
        """Advance the session to the next level and restart the clock."""
        self.stop()
        bonus = self._session.advance_level()
        self.start()
        return bonus

    def retry(self) -> None:
        """Restart the whole game from level 1."""
        self.stop()
        self._game_over = False
        self._session.reset()
        self.start()

    # ------------------------------------------------------------------
    # player input
    # ------------------------------------------------------------------

    def on_card_clicked(self, card_id: str) -> MatchResult | None:
        if self._game_over:
            return None
        result = self._session.select_card(card_id)
        if result == MatchResult.MISMATCHED:
            first, second = self._session.pending_ids
            deal = self._session.deal
            self._schedule(
                self._session.rules.mismatch_flip_back_ms / MS_PER_SECOND,
                lambda: self._session.unflip(first, second, deal=deal),
            )
        elif result == MatchResult.MATCHED and self._session.is_level_complete():
            # the remaining time is banked as bonus, so it must stop draining
            self._stop_clock()
        return result

    def on_power_up(self, kind: PowerUpKind | str) -> bool:
        if self._game_over or not self._session.use_power_up(kind):
            return False

        rules = self._session.rules
        power_up_kind = PowerUpKind(kind)
        if power_up_kind == PowerUpKind.REVEAL:
            self._schedule(rules.reveal_duration_ms / MS_PER_SECOND, self._session.end_reveal)
        elif power_up_kind == PowerUpKind.HINT and self._session.hint_card_ids:
            self._schedule(rules.hint_duration_ms / MS_PER_SECOND, self._session.clear_hint)
        return True

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    async def _run_clock(self) -> None:
        interval = self._session.rules.tick_interval_seconds
        try:
            while True:
                await asyncio.sleep(interval)
                try:
                    self._session.tick()
                except Exception:  # noqa: BLE001
                    # the countdown has already moved even when the listener raised
                    logger.exception("clock tick callback failed")
                if self._session.is_time_up():
                    self._finish_game()
                    return
        except asyncio.CancelledError:
            pass
        except Exception:  # noqa: BLE001
            logger.exception("game clock failed")

    def _finish_game(self) -> None:
        self._game_over = True
        self._cancel_delayed()
        session = self._session
        logger.info("game over", player=self._player_name, score=session.score, game_level=session.level)

        entry: ScoreEntry | None = None
        if self._leaderboard is not None and self._leaderboard.qualifies(session.score):
            try:
                entry = self._leaderboard.add_score(self._player_name, session.score, session.difficulty, session.level)
            except LeaderboardUnavailableError:
                # already logged by the leaderboard controller; the score stays on the in-memory board
                entry = None

        if self._on_game_over is not None:
            self._on_game_over(entry)

    def _schedule(self, delay: float, action: Callable[[], None]) -> None:
        task = asyncio.create_task(self._run_delayed(delay, action))
        self._delayed_tasks.add(task)
        task.add_done_callback(self._delayed_tasks.discard)

    async def _run_delayed(self, delay: float, action: Callable[[], None]) -> None:
        try:
            await asyncio.sleep(delay)
            action()
        except asyncio.CancelledError:
            pass
        except Exception:  # noqa: BLE001
            logger.exception("delayed action failed")

    def _stop_clock(self) -> None:
        # never cancel the task we are running inside (time expiry finishes the game from the clock task)
        current = asyncio.current_task()
        if self._clock_task is not None and self._clock_task is not current and not self._clock_task.done():
            self._clock_task.cancel()
        self._clock_task = None

    def _cancel_delayed(self) -> None:
        for task in list(self._delayed_tasks):
            task.cancel()
        self._delayed_tasks.clear()
