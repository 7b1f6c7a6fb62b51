"""
Deck building: balanced, shuffled card sets for a difficulty and theme.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from memory_match.logic.cards import PAIR_SIDE_TAGS, Card, make_card_id
from memory_match.logic.difficulty import total_pairs
from memory_match.logic.exceptions import UnsupportedSettingsError
from memory_match.logic.settings import GameRules
from memory_match.logic.themes import get_theme_config

if TYPE_CHECKING:
    import random

    from memory_match.logic.difficulty import Difficulty
    from memory_match.logic.themes import Theme


def card_score(theme: Theme, rules: GameRules | None = None) -> int:
    """Score a single card of this theme is worth before combo multiplication."""
    default_score = (rules or GameRules()).default_card_score
    return default_score + get_theme_config(theme).score_bonus


def build_deck(
    difficulty: Difficulty,
    theme: Theme,
    rng: random.Random,
    rules: GameRules | None = None,
) -> list[Card]:
    """
    Build a fresh deck of 2 * total_pairs cards in random grid order.

    Each of the theme's first total_pairs symbols appears exactly twice.
    The whole sequence is then shuffled uniformly with the given rng.
    """
    pairs = total_pairs(difficulty)
    symbols = get_theme_config(theme).symbols
    if pairs > len(symbols):
        raise UnsupportedSettingsError(
            f"theme {theme.value} has {len(symbols)} symbols, {difficulty.value} needs {pairs}"
        )

    score = card_score(theme, rules)
    cards = [
        Card(id=make_card_id(symbol, side), pair_key=symbol, base_score=score)
        for symbol in symbols[:pairs]
        for side in PAIR_SIDE_TAGS
    ]
    rng.shuffle(cards)
    return cards
