"""Ranked, capped and persisted leaderboard.

The board keeps at most MAX_ENTRIES entries in ranking order (score
descending, more recent first on ties). It is stored as a JSON document:

    {"version": 1, "entries": [{"player_name": ..., "score": ..., ...}, ...]}

A bare JSON list of records is accepted on load as well.

Load is all-or-nothing at the document level and lenient at the record
level: a file that cannot be read or parsed raises LeaderboardCorruptError
and leaves the board untouched, while individual records that fail
validation (unknown difficulty, negative score, ...) are skipped.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from memory_match.leaderboard.exceptions import LeaderboardCorruptError, LeaderboardUnavailableError
from memory_match.leaderboard.models import ScoreEntry, rank_entries
from shared.storage import atomic_write_text

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = structlog.get_logger()

MAX_ENTRIES = 10
STORAGE_VERSION = 1


class Leaderboard:
    """Top-N score table."""

    def __init__(self, entries: list[ScoreEntry] | None = None) -> None:
        self._entries: list[ScoreEntry] = rank_entries(entries or [])[:MAX_ENTRIES]

    @property
    def entries(self) -> tuple[ScoreEntry, ...]:
        """Entries in ranking order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(tuple(self._entries))

    def add_entry(self, entry: ScoreEntry) -> None:
        """Insert an entry, re-rank, and drop anything beyond MAX_ENTRIES."""
        self._entries = rank_entries([*self._entries, entry])[:MAX_ENTRIES]

    def qualifies(self, score: int) -> bool:
        """True if a game with this score would make it onto the board."""
        if len(self._entries) < MAX_ENTRIES:
            return True
        return score > self._entries[-1].score

    def clear(self) -> None:
        self._entries = []

    # ------------------------------------------------------------------
    # persistence
    # ------------------------------------------------------------------

    def to_document(self) -> dict[str, Any]:
        return {
            "version": STORAGE_VERSION,
            "entries": [entry.model_dump(mode="json") for entry in self._entries],
        }

    def save(self, path: Path | str) -> None:
        """Write the full board to ``path``, creating parent directories as needed.

        Raises LeaderboardUnavailableError when the file cannot be written.
        The in-memory board is unaffected either way.
        """
        content = json.dumps(self.to_document(), ensure_ascii=False, indent=2)
        try:
            atomic_write_text(path, content)
        except OSError as exc:
            msg = f"Failed to save leaderboard to {path}"
            raise LeaderboardUnavailableError(msg) from exc
        logger.info("leaderboard saved", path=str(path), entries=len(self._entries))

    def load(self, path: Path | str) -> None:
        """Replace the board with the contents of ``path``.

        A missing file leaves the board unchanged. Raises
        LeaderboardCorruptError for an unreadable or malformed file, again
        without touching the board.
        """
        file_path = Path(path)
        if not file_path.exists():
            logger.debug("no leaderboard file", path=str(file_path))
            return

        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            msg = f"Leaderboard data in {file_path} is corrupted"
            raise LeaderboardCorruptError(msg) from exc

        records = _extract_records(data, file_path)
        decoded = (_decode_record(record, index) for index, record in enumerate(records))
        loaded = [entry for entry in decoded if entry is not None]
        self._entries = rank_entries(loaded)[:MAX_ENTRIES]
        logger.info(
            "leaderboard loaded",
            path=str(file_path),
            entries=len(self._entries),
            skipped=len(records) - len(loaded),
        )


def _extract_records(data: object, file_path: Path) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("entries"), list):
        return data["entries"]
    msg = f"Expected a list of score records in {file_path}"
    raise LeaderboardCorruptError(msg)


def _decode_record(record: object, index: int) -> ScoreEntry | None:
    """Validate one stored record, returning None (and logging) when it is unusable."""
    try:
        return ScoreEntry.model_validate(record)
    except ValidationError as exc:
        logger.warning("skipping invalid leaderboard record", index=index, errors=exc.error_count())
        return None
