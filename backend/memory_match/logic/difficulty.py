"""
Difficulty levels and their board/timer configuration.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Difficulty(StrEnum):
    """Fixed set of difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class DifficultyConfig(BaseModel):
    """Board shape, starting timer and nominal per-pair score for a difficulty."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    columns: int
    rows: int
    timer_seconds: int
    base_score: int

    @property
    def total_cards(self) -> int:
        return self.columns * self.rows

    @property
    def total_pairs(self) -> int:
        return self.total_cards // 2


DIFFICULTY_CONFIGS: dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(display_name="Easy", columns=4, rows=4, timer_seconds=120, base_score=10),
    Difficulty.MEDIUM: DifficultyConfig(display_name="Medium", columns=6, rows=5, timer_seconds=180, base_score=15),
    Difficulty.HARD: DifficultyConfig(display_name="Hard", columns=6, rows=5, timer_seconds=240, base_score=20),
}

# largest deck any difficulty deals; every theme must supply at least this many symbols
MAX_PAIRS = max(config.total_pairs for config in DIFFICULTY_CONFIGS.values())


def get_difficulty_config(difficulty: Difficulty) -> DifficultyConfig:
    return DIFFICULTY_CONFIGS[difficulty]


def total_pairs(difficulty: Difficulty) -> int:
    """Number of pairs dealt for a difficulty: (columns * rows) / 2."""
    return DIFFICULTY_CONFIGS[difficulty].total_pairs
