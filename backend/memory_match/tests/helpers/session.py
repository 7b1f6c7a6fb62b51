"""Builders and shortcuts for driving a GameSession in tests."""

from __future__ import annotations

import random
from collections import defaultdict
from typing import TYPE_CHECKING

from memory_match.logic.difficulty import Difficulty
from memory_match.logic.session import GameSession
from memory_match.logic.themes import Theme

if TYPE_CHECKING:
    from memory_match.logic.events import SessionListener
    from memory_match.logic.settings import GameRules

TEST_SEED = "ab" * 32


def create_session(
    difficulty: Difficulty = Difficulty.EASY,
    theme: Theme = Theme.FRUITS,
    *,
    rules: GameRules | None = None,
    listener: SessionListener | None = None,
    rng_seed: int = 1234,
) -> GameSession:
    """Session with a deterministic rng. Fruits cards score a flat 10."""
    return GameSession(difficulty, theme, rules=rules, rng=random.Random(rng_seed), listener=listener)


def pairs_by_key(session: GameSession) -> dict[str, list[str]]:
    """Card ids grouped by pair key, in grid order."""
    groups: dict[str, list[str]] = defaultdict(list)
    for card in session.cards:
        groups[card.pair_key].append(card.id)
    return dict(groups)


def unmatched_pairs(session: GameSession) -> list[tuple[str, str]]:
    return [
        (first, second)
        for first, second in pairs_by_key(session).values()
        if not session.get_card(first).matched  # type: ignore[union-attr]
    ]


def mismatched_ids(session: GameSession) -> tuple[str, str]:
    """Two unmatched card ids from different pairs."""
    (a, _), (b, _) = unmatched_pairs(session)[:2]
    return a, b


def match_next_pair(session: GameSession):
    """Select both cards of the first unmatched pair."""
    first, second = unmatched_pairs(session)[0]
    session.select_card(first)
    return session.select_card(second)


def play_mismatch(session: GameSession) -> None:
    """Select two cards of different pairs, then flip them back."""
    a, b = mismatched_ids(session)
    session.select_card(a)
    session.select_card(b)
    session.unflip(a, b)
