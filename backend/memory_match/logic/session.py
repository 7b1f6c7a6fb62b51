"""
Game session state machine for Memory Match.

A GameSession owns one player's current level: the deck, score and combo,
the countdown, the power-ups and the pending card selection. Every method is
a synchronous, instantaneous state transition. Anything that takes
wall-clock time (flipping a mismatched pair back, the reveal and hint
windows, the once-per-second tick) belongs to the caller, which calls back
into the session when its own timer fires.

Selection flow:
    Idle --select--> OneSelected --select--> Evaluating
    Evaluating --matched--> Idle
    Evaluating --mismatched--> (pair stays face up) --unflip--> Idle

While two cards are pending, further selections are ignored, so at most one
pair is evaluated at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from memory_match.logic.deck import build_deck
from memory_match.logic.difficulty import get_difficulty_config
from memory_match.logic.enums import GamePhase, MatchResult, PowerUpKind
from memory_match.logic.events import (
    CardStateChangedEvent,
    HintReadyEvent,
    LevelCompleteEvent,
    MatchResolvedEvent,
    PowerUpUsedEvent,
    SessionEvent,
    TimeExpiredEvent,
)
from memory_match.logic.exceptions import NotPendingPairError, UnknownCardError, UnknownPowerUpError
from memory_match.logic.powerups import build_power_ups
from memory_match.logic.rng import create_rng, derive_level_rng, validate_seed_hex
from memory_match.logic.settings import GameRules, level_timer_seconds, validate_rules
from memory_match.logic.timer import CountdownTimer

if TYPE_CHECKING:
    import random

    from memory_match.logic.cards import Card
    from memory_match.logic.difficulty import Difficulty, DifficultyConfig
    from memory_match.logic.events import SessionListener
    from memory_match.logic.powerups import PowerUp
    from memory_match.logic.themes import Theme

logger = structlog.get_logger()

PAIR_SIZE = 2


class GameSession:
    """
    Mutable aggregate for one game: deck, score, combo, timer and power-ups.

    Difficulty and theme are fixed for the session's lifetime. A session
    starts at level 1 with a freshly shuffled deck.

    Randomness comes from ``rng`` when given. With ``seed`` instead, each
    level's deck is derived from the seed so a replayed session deals the
    same grids; hints still draw from the session rng.
    """

    def __init__(  # noqa: PLR0913
        self,
        difficulty: Difficulty,
        theme: Theme,
        *,
        rules: GameRules | None = None,
        rng: random.Random | None = None,
        seed: str | None = None,
        listener: SessionListener | None = None,
    ) -> None:
        self._difficulty = difficulty
        self._theme = theme
        self.rules = rules or GameRules()
        validate_rules(self.rules)
        if seed is not None:
            validate_seed_hex(seed)
        self._seed = seed
        self.rng = rng or create_rng(seed)
        self._listener = listener

        self.cards: list[Card] = []
        self._cards_by_id: dict[str, Card] = {}
        self._pending: list[str] = []
        self._deal = 0
        self.power_ups: dict[PowerUpKind, PowerUp] = build_power_ups()
        self.timer = CountdownTimer()
        self.score = 0
        self.combo = 0
        self.level = 1
        self.matches_found = 0
        self.revealing = False
        self.hint_card_ids: tuple[str, ...] = ()

        self._start_level()

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def seed(self) -> str | None:
        return self._seed

    @property
    def difficulty_config(self) -> DifficultyConfig:
        return get_difficulty_config(self._difficulty)

    @property
    def total_pairs(self) -> int:
        return self.difficulty_config.total_pairs

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    @property
    def time_remaining(self) -> int:
        return self.timer.time_remaining

    @property
    def timer_frozen(self) -> bool:
        return self.timer.frozen

    @property
    def frozen_seconds_left(self) -> int:
        return self.timer.frozen_seconds_left

    @property
    def deal(self) -> int:
        """Counter bumped every time a new deck is dealt (level start or reset)."""
        return self._deal

    @property
    def pending_ids(self) -> tuple[str, ...]:
        """Ids of selected cards that are face up but not yet resolved."""
        return tuple(self._pending)

    @property
    def phase(self) -> GamePhase:
        if self.is_level_complete():
            return GamePhase.LEVEL_COMPLETE
        if self.is_time_up():
            return GamePhase.TIME_UP
        return GamePhase.PLAYING

    def get_card(self, card_id: str) -> Card | None:
        return self._cards_by_id.get(card_id)

    def is_level_complete(self) -> bool:
        return self.matches_found == self.total_pairs

    def is_time_up(self) -> bool:
        return self.timer.expired

    # ------------------------------------------------------------------
    # card selection
    # ------------------------------------------------------------------

    def select_card(self, card_id: str) -> MatchResult | None:
        """
        Turn a card face up as part of the current selection.

        Ignored without any state change when the card is unknown, matched,
        already face up or already selected, or when a pair is still pending.
        Returns the match result when this was the second card of a pair,
        otherwise None.
        """
        if len(self._pending) >= PAIR_SIZE:
            return None
        card = self._cards_by_id.get(card_id)
        if card is None or card.matched or card.face_up or card_id in self._pending:
            return None

        card.set_face_up(True)
        self._pending.append(card_id)
        self._emit_card(card)

        if len(self._pending) == PAIR_SIZE:
            first, second = self._pending
            return self.evaluate_pending(first, second)
        return None

    def evaluate_pending(self, id_a: str, id_b: str) -> MatchResult:
        """
        Resolve two face-up cards.

        On a match the combo grows by one and the stronger card's score times
        the new combo is added; both cards become matched. On a mismatch the
        combo drops to zero and both cards stay face up and pending until the
        caller invokes ``unflip``.

        Raises UnknownCardError for ids outside the current deck and
        NotPendingPairError unless the two ids are exactly the two selected,
        unresolved cards (so a matched pair can never be scored twice).
        """
        card_a = self._require_card(id_a)
        card_b = self._require_card(id_b)
        if id_a == id_b or len(self._pending) != PAIR_SIZE or {id_a, id_b} != set(self._pending):
            raise NotPendingPairError(id_a, id_b)

        if card_a.matches(card_b):
            self.combo += 1
            self.score += max(card_a.base_score, card_b.base_score) * self.combo
            card_a.set_matched()
            card_b.set_matched()
            self.matches_found += 1
            self._drop_pending(id_a, id_b)
            if self.hint_card_ids and {id_a, id_b} & set(self.hint_card_ids):
                self.hint_card_ids = ()
            self._emit_card(card_a)
            self._emit_card(card_b)
            result = MatchResult.MATCHED
        else:
            self.combo = 0
            result = MatchResult.MISMATCHED

        self._emit(
            MatchResolvedEvent(result=result, card_a=id_a, card_b=id_b, combo=self.combo, score=self.score)
        )
        if result == MatchResult.MATCHED and self.is_level_complete():
            logger.info("level complete", game_level=self.level, score=self.score, combo=self.combo)
            self._emit(LevelCompleteEvent(level=self.level, score=self.score))
        return result

    def unflip(self, id_a: str, id_b: str, *, deal: int | None = None) -> None:
        """
        Turn a mismatched pair face down again and release the selection.

        Card ids repeat from one deal to the next, so a flip-back scheduled
        before ``advance_level`` or ``reset`` would otherwise hit the new
        deck. Passing the ``deal`` captured at mismatch time makes such a
        late call a no-op. The call is also a no-op unless the two ids are
        the pair currently pending.
        """
        if deal is not None and deal != self._deal:
            return
        if len(self._pending) != PAIR_SIZE or {id_a, id_b} != set(self._pending):
            return
        flipped = [self._cards_by_id[card_id] for card_id in (id_a, id_b)]
        for card in flipped:
            card.set_face_up(False)
        self._pending = []
        for card in flipped:
            self._emit_card(card)

    # ------------------------------------------------------------------
    # timer
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if self.timer.tick():
            logger.info("time expired", game_level=self.level, score=self.score)
            self._emit(TimeExpiredEvent(level=self.level, score=self.score))

    # ------------------------------------------------------------------
    # power-ups
    # ------------------------------------------------------------------

    def use_power_up(self, kind: PowerUpKind | str) -> bool:
        """
        Activate a power-up by kind or by its string value.

        Returns False when it was already used this level.
        """
        try:
            power_up_kind = PowerUpKind(kind)
        except ValueError:
            raise UnknownPowerUpError(str(kind)) from None

        if not self.power_ups[power_up_kind].use(self):
            return False

        logger.info("power-up used", power_up=power_up_kind, game_level=self.level)
        self._emit(PowerUpUsedEvent(power_up=power_up_kind))
        if power_up_kind == PowerUpKind.HINT and self.hint_card_ids:
            card_a, card_b = self.hint_card_ids
            self._emit(HintReadyEvent(card_a=card_a, card_b=card_b))
        return True

    def end_reveal(self) -> None:
        """Close the reveal window opened by the Reveal power-up."""
        self.revealing = False

    def clear_hint(self) -> None:
        """Close the hint window opened by the Hint power-up."""
        self.hint_card_ids = ()

    # ------------------------------------------------------------------
    # level progression
    # ------------------------------------------------------------------

    def advance_level(self) -> int:
        """
        Award the end-of-level bonus and deal the next level.

        Bonus is the remaining seconds times the per-second bonus plus the
        completion bonus times the finished level number. The combo carries
        over. Returns the bonus awarded.
        """
        bonus = (
            self.timer.time_remaining * self.rules.time_bonus_per_second
            + self.rules.level_completion_bonus * self.level
        )
        self.score += bonus
        self.level += 1
        self._start_level()
        logger.info(
            "level advanced",
            game_level=self.level,
            bonus=bonus,
            score=self.score,
            time_remaining=self.timer.time_remaining,
        )
        return bonus

    def reset(self) -> None:
        """Restart from level 1 with zero score and the difficulty's full timer."""
        self.score = 0
        self.combo = 0
        self.level = 1
        self._start_level()
        logger.info("session reset", difficulty=self._difficulty, theme=self._theme)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _start_level(self) -> None:
        self._deal += 1
        self.matches_found = 0
        self.revealing = False
        self.hint_card_ids = ()
        self._pending = []

        rng = derive_level_rng(self._seed, self.level) if self._seed is not None else self.rng
        self.cards = build_deck(self._difficulty, self._theme, rng, self.rules)
        self._cards_by_id = {card.id: card for card in self.cards}

        self.timer.restart(level_timer_seconds(self.difficulty_config.timer_seconds, self.level, self.rules))
        for power_up in self.power_ups.values():
            power_up.reset()

    def _require_card(self, card_id: str) -> Card:
        card = self._cards_by_id.get(card_id)
        if card is None:
            raise UnknownCardError(card_id)
        return card

    def _drop_pending(self, *card_ids: str) -> None:
        self._pending = [pending for pending in self._pending if pending not in card_ids]

    def _emit_card(self, card: Card) -> None:
        self._emit(CardStateChangedEvent(card_id=card.id, face_up=card.face_up, matched=card.matched))

    def _emit(self, event: SessionEvent) -> None:
        if self._listener is not None:
            self._listener(event)
