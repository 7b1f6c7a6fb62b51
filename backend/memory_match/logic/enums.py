"""
String enum definitions for Memory Match game concepts.
"""

from enum import StrEnum


class MatchResult(StrEnum):
    """Outcome of comparing two selected cards."""

    MATCHED = "matched"
    MISMATCHED = "mismatched"


class PowerUpKind(StrEnum):
    """One-shot-per-level power-ups."""

    REVEAL = "reveal"
    FREEZE = "freeze"
    HINT = "hint"


class GamePhase(StrEnum):
    """Phase of a level as seen by the controller."""

    PLAYING = "playing"
    LEVEL_COMPLETE = "level_complete"
    TIME_UP = "time_up"
