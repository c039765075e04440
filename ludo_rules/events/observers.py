"""
Ludo Rules - Stock Observers

Small observers for the event channel: one that writes a log line per
event and one that records payloads for later inspection.
"""

from __future__ import annotations

import logging

from ludo_rules.events.events import EventPayload, GameEvent

logger = logging.getLogger(__name__)


def describe(payload: EventPayload) -> str:
    """Human-readable status line for an event."""
    color = payload.color.value if payload.color else "-"
    data = payload.data

    if payload.event == GameEvent.TURN_CHANGED:
        return f"{color}'s turn - roll the dice!"
    if payload.event == GameEvent.DICE_ROLLED:
        return f"{color} rolled {data.get('value')}"
    if payload.event == GameEvent.PIECE_MOVED:
        return f"{color} piece moved {data.get('steps')} steps"
    if payload.event == GameEvent.PIECE_KNOCKED_OUT:
        knocked = data.get("knocked")
        attacker = data.get("attacker")
        return f"{attacker.color.value} knocked out {knocked.color.value}!"
    if payload.event == GameEvent.GAME_WON:
        return f"{color} wins!"
    return f"{payload.event.name.lower()} ({color})"


class LoggingObserver:
    """Writes every event to the log; stands in for a status-text panel."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def __call__(self, payload: EventPayload) -> None:
        if payload.event in (GameEvent.PIECE_RELOCATED, GameEvent.PHASE_CHANGED):
            logger.debug(describe(payload))
            return
        logger.log(self.level, describe(payload))


class EventRecorder:
    """Keeps every payload it receives, in order."""

    def __init__(self) -> None:
        self.payloads: list[EventPayload] = []

    def __call__(self, payload: EventPayload) -> None:
        self.payloads.append(payload)

    @property
    def events(self) -> list[GameEvent]:
        return [p.event for p in self.payloads]

    def of(self, event: GameEvent) -> list[EventPayload]:
        return [p for p in self.payloads if p.event == event]

    def clear(self) -> None:
        self.payloads.clear()
