"""
Power-ups: Reveal, Freeze and Hint.

Each kind is available once per level. Effects are plain functions resolved
through a dispatch table keyed by PowerUpKind; they perform an instantaneous
state change on the session and never schedule anything. The caller owns the
reveal and hint display windows and clears them through the session.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from memory_match.logic.enums import PowerUpKind

if TYPE_CHECKING:
    import random
    from collections.abc import Callable, Iterable

    from memory_match.logic.cards import Card
    from memory_match.logic.session import GameSession


class PowerUpInfo(BaseModel):
    """Display metadata for a power-up kind."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    icon: str


POWER_UP_INFO: dict[PowerUpKind, PowerUpInfo] = {
    PowerUpKind.REVEAL: PowerUpInfo(name="Reveal", description="Shows all cards for 2 seconds", icon="👁"),
    PowerUpKind.FREEZE: PowerUpInfo(name="Freeze", description="Pauses the timer for 10 seconds", icon="❄"),
    PowerUpKind.HINT: PowerUpInfo(name="Hint", description="Highlights one matching pair for 2 seconds", icon="💡"),
}


def find_hint_pair(cards: Iterable[Card], rng: random.Random) -> tuple[str, str] | None:
    """
    Pick a random pair whose two cards are both face down and unmatched.

    Returns the two card ids, or None when no such pair exists (for example
    when the only remaining pair has one card currently selected).
    """
    groups: dict[str, list[Card]] = defaultdict(list)
    for card in cards:
        if not card.matched and not card.face_up:
            groups[card.pair_key].append(card)

    candidates = [key for key, group in groups.items() if len(group) == 2]  # noqa: PLR2004
    if not candidates:
        return None
    first, second = groups[rng.choice(candidates)]
    return first.id, second.id


def _activate_reveal(session: GameSession) -> None:
    session.revealing = True


def _activate_freeze(session: GameSession) -> None:
    session.timer.freeze(session.rules.freeze_duration_seconds)


def _activate_hint(session: GameSession) -> None:
    pair = find_hint_pair(session.cards, session.rng)
    session.hint_card_ids = pair if pair is not None else ()


_EFFECTS: dict[PowerUpKind, Callable[[GameSession], None]] = {
    PowerUpKind.REVEAL: _activate_reveal,
    PowerUpKind.FREEZE: _activate_freeze,
    PowerUpKind.HINT: _activate_hint,
}


@dataclass
class PowerUp:
    """A single power-up slot, armed at level start and spent on use."""

    kind: PowerUpKind
    available: bool = True

    @property
    def info(self) -> PowerUpInfo:
        return POWER_UP_INFO[self.kind]

    def use(self, session: GameSession) -> bool:
        """
        Spend the power-up and apply its effect.

        Returns False without touching the session when already spent this level.
        """
        if not self.available:
            return False
        self.available = False
        _EFFECTS[self.kind](session)
        return True

    def reset(self) -> None:
        self.available = True


def build_power_ups() -> dict[PowerUpKind, PowerUp]:
    """One armed power-up of each kind, in display order."""
    return {kind: PowerUp(kind=kind) for kind in PowerUpKind}
