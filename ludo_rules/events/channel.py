"""
Ludo Rules - Event Channel

One-to-many, synchronous notification fan-out from the turn controller to
presentation collaborators (status text, audio cues, animation).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from ludo_rules.events.events import EventPayload, GameEvent

if TYPE_CHECKING:
    from ludo_rules.engine.base import Color

logger = logging.getLogger(__name__)

Observer = Callable[[EventPayload], None]


class EventChannel:
    """Ordered observer registry.

    Notification iterates over a snapshot of the registry taken when
    notify() is called, so observers may register or unregister (themselves
    or others) while being notified. Delivery is at most once per call;
    an observer that raises is logged and skipped.
    """

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def register(self, observer: Observer) -> None:
        """Add an observer. Registering the same observer twice is a no-op."""
        if observer in self._observers:
            return
        self._observers.append(observer)
        logger.debug("Observer registered. Total observers: %d", len(self._observers))

    def unregister(self, observer: Observer) -> None:
        """Remove an observer if present."""
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug("Observer unregistered. Total observers: %d", len(self._observers))

    def notify(self, event: GameEvent, color: Color | None = None, **data: Any) -> EventPayload:
        """Deliver an event to every registered observer, in registration order."""
        payload = EventPayload(event=event, color=color, data=data)

        for observer in list(self._observers):
            try:
                observer(payload)
            except Exception:
                logger.exception("Observer %r failed handling %s", observer, event.name)

        return payload

    @property
    def observers(self) -> list[Observer]:
        return list(self._observers)

    def clear(self) -> None:
        self._observers.clear()

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers
