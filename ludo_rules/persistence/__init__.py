"""
Ludo Rules Persistence.

Snapshot models for saving and restoring a match.
"""

from ludo_rules.persistence.models import MatchSnapshot, PlayerRecord
from ludo_rules.persistence.snapshots import capture_snapshot, restore_snapshot

__all__ = [
    "MatchSnapshot",
    "PlayerRecord",
    "capture_snapshot",
    "restore_snapshot",
]
