"""Application configuration via environment variables."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from memory_match.logic.rng import validate_seed_hex
from shared.storage import default_data_dir

DEFAULT_LEADERBOARD_FILE = "leaderboard.dat"


class AppSettings(BaseSettings):
    model_config = {"env_prefix": "MEMORY_"}

    data_dir: Path = Field(default_factory=default_data_dir)
    leaderboard_file: str = DEFAULT_LEADERBOARD_FILE
    log_dir: str | None = None

    # Hex seed for reproducible decks; unset means a fresh random deck every game.
    seed: str | None = None

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: str | None) -> str | None:
        if v is not None:
            validate_seed_hex(v)
        return v

    @property
    def leaderboard_path(self) -> Path:
        return self.data_dir / self.leaderboard_file
