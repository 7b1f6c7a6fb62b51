"""Centralized game rules for Memory Match - scoring, timer and power-up constants."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from memory_match.logic.exceptions import UnsupportedSettingsError


class GameRules(BaseModel):
    """
    Configuration for all scoring and timing rules.

    All fields have default values matching the classic game.
    """

    model_config = ConfigDict(frozen=True)

    # --- Cards ---
    default_card_score: int = 10

    # --- Level Progression ---
    time_bonus_per_second: int = 1
    level_completion_bonus: int = 50
    timer_reduction_per_level: int = 10
    min_level_timer_seconds: int = 30

    # --- Power-ups ---
    freeze_duration_seconds: int = 10
    reveal_duration_ms: int = 2000
    hint_duration_ms: int = 2000

    # --- Pacing (owned by the controller, not the session) ---
    mismatch_flip_back_ms: int = 900
    tick_interval_seconds: float = 1.0


def validate_rules(rules: GameRules) -> None:
    """
    Reject rule combinations the engine cannot play.

    Raises UnsupportedSettingsError describing every violation found.
    """
    errors: list[str] = []
    if rules.default_card_score <= 0:
        errors.append("default_card_score must be positive")
    if rules.time_bonus_per_second < 0:
        errors.append("time_bonus_per_second must not be negative")
    if rules.level_completion_bonus < 0:
        errors.append("level_completion_bonus must not be negative")
    if rules.timer_reduction_per_level < 0:
        errors.append("timer_reduction_per_level must not be negative")
    if rules.min_level_timer_seconds <= 0:
        errors.append("min_level_timer_seconds must be positive")
    if rules.freeze_duration_seconds <= 0:
        errors.append("freeze_duration_seconds must be positive")
    if rules.reveal_duration_ms < 0 or rules.hint_duration_ms < 0 or rules.mismatch_flip_back_ms < 0:
        errors.append("power-up and flip-back durations must not be negative")
    if rules.tick_interval_seconds <= 0:
        errors.append("tick_interval_seconds must be positive")
    if errors:
        raise UnsupportedSettingsError("; ".join(errors))


def level_timer_seconds(base_timer_seconds: int, level: int, rules: GameRules) -> int:
    """Countdown for a level: shortened each level, never below the floor."""
    reduced = base_timer_seconds - (level - 1) * rules.timer_reduction_per_level
    return max(rules.min_level_timer_seconds, reduced)
