"""
Card model for the memory grid.
"""

from __future__ import annotations

from dataclasses import dataclass

PAIR_SIDE_TAGS = ("A", "B")


def make_card_id(pair_key: str, side: str) -> str:
    """Build a session-unique card id from its pair key and side tag."""
    return f"{pair_key}_{side}"


@dataclass
class Card:
    """
    One face of a pair.

    Once matched a card stays face up for the rest of the level: every
    face-changing method is a no-op on a matched card.
    """

    id: str
    pair_key: str
    base_score: int
    face_up: bool = False
    matched: bool = False

    def flip(self) -> None:
        if not self.matched:
            self.face_up = not self.face_up

    def set_face_up(self, face_up: bool) -> None:  # noqa: FBT001
        if not self.matched:
            self.face_up = face_up

    def set_matched(self) -> None:
        self.matched = True
        self.face_up = True

    def matches(self, other: Card) -> bool:
        """Two distinct cards match when they share a pair key."""
        return self.id != other.id and self.pair_key == other.pair_key
