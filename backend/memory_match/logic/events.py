"""Session event models delivered to the renderer.

The session never calls into a view, sound or animation layer directly. It
emits these frozen events to a single injected listener; the listener
decides how to animate, play sounds or refresh the HUD.

All layers import exclusively from this module for event types.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from memory_match.logic.enums import MatchResult, PowerUpKind


class EventType(StrEnum):
    """Types of session events."""

    CARD_STATE_CHANGED = "card_state_changed"
    MATCH_RESOLVED = "match_resolved"
    LEVEL_COMPLETE = "level_complete"
    TIME_EXPIRED = "time_expired"
    POWER_UP_USED = "power_up_used"
    HINT_READY = "hint_ready"


class SessionEvent(BaseModel):
    """Base class for all session events."""

    model_config = ConfigDict(frozen=True)

    type: EventType


class CardStateChangedEvent(SessionEvent):
    """A card turned face up, face down, or became matched."""

    type: Literal[EventType.CARD_STATE_CHANGED] = EventType.CARD_STATE_CHANGED
    card_id: str
    face_up: bool
    matched: bool


class MatchResolvedEvent(SessionEvent):
    """Two selected cards were compared."""

    type: Literal[EventType.MATCH_RESOLVED] = EventType.MATCH_RESOLVED
    result: MatchResult
    card_a: str
    card_b: str
    combo: int
    score: int


class LevelCompleteEvent(SessionEvent):
    type: Literal[EventType.LEVEL_COMPLETE] = EventType.LEVEL_COMPLETE
    level: int
    score: int


class TimeExpiredEvent(SessionEvent):
    type: Literal[EventType.TIME_EXPIRED] = EventType.TIME_EXPIRED
    level: int
    score: int


class PowerUpUsedEvent(SessionEvent):
    type: Literal[EventType.POWER_UP_USED] = EventType.POWER_UP_USED
    power_up: PowerUpKind


class HintReadyEvent(SessionEvent):
    """A hint pair was chosen; the renderer highlights both cards."""

    type: Literal[EventType.HINT_READY] = EventType.HINT_READY
    card_a: str
    card_b: str


SessionListener = Callable[[SessionEvent], None]
