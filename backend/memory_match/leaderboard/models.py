"""Immutable leaderboard records."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from memory_match.logic.difficulty import Difficulty, get_difficulty_config

DEFAULT_PLAYER_NAME = "Player"
DISPLAY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


class ScoreEntry(BaseModel):
    """
    One finished game on the leaderboard.

    Validation is strict so records read back from disk with negative scores,
    a zero level or an unknown difficulty are rejected. ``create`` is the
    lenient constructor used for freshly finished games.
    """

    model_config = ConfigDict(frozen=True)

    player_name: str = DEFAULT_PLAYER_NAME
    score: int = Field(ge=0)
    difficulty: Difficulty
    level: int = Field(ge=1)
    timestamp: datetime

    @field_validator("player_name", mode="before")
    @classmethod
    def _normalize_name(cls, v: object) -> object:
        if v is None:
            return DEFAULT_PLAYER_NAME
        if isinstance(v, str):
            return v.strip() or DEFAULT_PLAYER_NAME
        return v

    @field_validator("timestamp")
    @classmethod
    def _require_timezone(cls, v: datetime) -> datetime:
        # naive timestamps cannot be ordered against aware ones
        return v if v.tzinfo is not None else v.replace(tzinfo=UTC)

    @classmethod
    def create(
        cls,
        player_name: str | None,
        score: int,
        difficulty: Difficulty,
        level: int,
        *,
        timestamp: datetime | None = None,
    ) -> ScoreEntry:
        """Build an entry for a finished game, clamping score and level into range."""
        return cls(
            player_name=player_name,
            score=max(0, score),
            difficulty=difficulty,
            level=max(1, level),
            timestamp=timestamp or datetime.now(tz=UTC),
        )

    @property
    def sort_key(self) -> tuple[int, datetime]:
        """Ascending key; sort with reverse=True for ranking order."""
        return self.score, self.timestamp

    def ranks_above(self, other: ScoreEntry) -> bool:
        """Higher score first; on equal scores the more recent entry wins."""
        return self.sort_key > other.sort_key

    def formatted_timestamp(self) -> str:
        return self.timestamp.strftime(DISPLAY_TIMESTAMP_FORMAT)

    def __str__(self) -> str:
        difficulty_name = get_difficulty_config(self.difficulty).display_name
        return (
            f"{self.player_name:<15} {self.score:>6}  {difficulty_name:<6}  "
            f"Lv{self.level}  {self.formatted_timestamp()}"
        )


def rank_entries(entries: list[ScoreEntry]) -> list[ScoreEntry]:
    """Sort entries into leaderboard order."""
    return sorted(entries, key=lambda entry: entry.sort_key, reverse=True)
