"""
Ludo Rules Events.

Observer registry and event types for presentation collaborators.
"""

from ludo_rules.events.channel import EventChannel, Observer
from ludo_rules.events.events import EventPayload, GameEvent
from ludo_rules.events.observers import EventRecorder, LoggingObserver

__all__ = [
    "EventChannel",
    "EventPayload",
    "EventRecorder",
    "GameEvent",
    "LoggingObserver",
    "Observer",
]
