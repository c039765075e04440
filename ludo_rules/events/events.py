"""
Ludo Rules - Event Definitions

Event types and payloads emitted by the turn controller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ludo_rules.engine.base import Color


class GameEvent(Enum):
    """Events that can occur during a match."""

    TURN_CHANGED = auto()
    DICE_ROLLED = auto()
    PIECE_MOVED = auto()
    PIECE_KNOCKED_OUT = auto()
    GAME_WON = auto()
    PIECE_RELOCATED = auto()
    HIGHLIGHTS_ENABLED = auto()
    HIGHLIGHTS_CLEARED = auto()
    PHASE_CHANGED = auto()
    GAME_RESTARTED = auto()


@dataclass
class EventPayload:
    """Wrapper for event data.

    Data keys per event:
        DICE_ROLLED: value
        PIECE_MOVED: piece, steps, result
        PIECE_KNOCKED_OUT: knocked, attacker
        PIECE_RELOCATED: piece, coordinate
        HIGHLIGHTS_ENABLED: pieces, steps
        PHASE_CHANGED: old, new
    """

    event: GameEvent
    color: Color | None = None
    data: dict[str, Any] = field(default_factory=dict)
