"""
Ludo Rules - Piece

Per-piece positional state and the move-legality / apply-move operation.

A piece's route is measured relative to its own color:

    -1        in the start area
    0 - 50    on the shared track
    51 - 56   on the private home stretch
    57        arrived home (terminal)

Progress only ever increases, except when an opponent captures the piece
and sends it back to the start area.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ludo_rules.engine import board as topology
from ludo_rules.engine.base import (
    DIE_FACES,
    EXIT_ROLL,
    HOME_POSITION,
    HOME_STRETCH_END,
    HOME_STRETCH_START,
    START_POSITION,
    Color,
    MoveResult,
    PieceState,
)
from ludo_rules.engine.validators import validate_relative_position

if TYPE_CHECKING:
    from ludo_rules.engine.board import Board
    from ludo_rules.engine.player import Player

logger = logging.getLogger(__name__)


class Piece:
    """A single piece. Belongs to exactly one player and never leaves the match."""

    def __init__(
        self,
        color: Color,
        index: int,
        board: Board,
        owner: Player | None = None,
    ) -> None:
        self.color = color
        self.index = index
        self.board = board
        self.owner = owner
        self._position = START_POSITION

    # -- Predicates ------------------------------------------------------

    @property
    def relative_position(self) -> int:
        return self._position

    @property
    def in_start_area(self) -> bool:
        return self._position == START_POSITION

    @property
    def on_track(self) -> bool:
        return topology.is_on_track(self._position)

    @property
    def in_home_stretch(self) -> bool:
        return HOME_STRETCH_START <= self._position <= HOME_STRETCH_END

    @property
    def has_arrived(self) -> bool:
        return self._position >= HOME_POSITION

    @property
    def in_safe_zone(self) -> bool:
        return topology.is_safe(self.color, self._position)

    @property
    def state(self) -> PieceState:
        if self.in_start_area:
            return PieceState.IN_START
        if self.has_arrived:
            return PieceState.ARRIVED
        if self.in_home_stretch:
            return PieceState.IN_HOME_STRETCH
        return PieceState.ON_TRACK

    @property
    def global_position(self) -> int | None:
        return topology.global_position(self.color, self._position)

    # -- Legality --------------------------------------------------------

    def can_move(self, steps: int) -> bool:
        """
        Check whether the piece may move by a die value.

        A piece in the start area needs exactly a six; any other piece
        may not overshoot home. Arrived pieces never move.
        """
        if isinstance(steps, bool) or not isinstance(steps, int):
            return False
        if not 1 <= steps <= DIE_FACES:
            return False
        if self.has_arrived:
            return False
        if self.in_start_area:
            return steps == EXIT_ROLL
        return self._position + steps <= HOME_POSITION

    def target_position(self, steps: int) -> int | None:
        """Relative position the piece would land on, or None if illegal."""
        if not self.can_move(steps):
            return None
        if self.in_start_area:
            return 0
        return self._position + steps

    def capture_targets(self, steps: int) -> list[Piece]:
        """
        Opponent pieces that moving by steps would send back to start.

        Captures only happen on non-safe shared track cells.
        """
        target = self.target_position(steps)
        if target is None or not topology.is_on_track(target):
            return []
        if topology.is_safe(self.color, target):
            return []
        return [
            piece for piece in self.board.occupants_at(self.color, target)
            if piece.color != self.color
        ]

    def would_capture(self, steps: int) -> bool:
        return bool(self.capture_targets(steps))

    # -- Mutation --------------------------------------------------------

    def move(self, steps: int) -> MoveResult:
        """
        Move the piece by a die value.

        Args:
            steps: Die value (1-6)

        Returns:
            INVALID_MOVE without any state change if the move is illegal,
            KNOCKED_OUT_OPPONENT if an opponent was captured, GAME_WON if
            this move brought the owner's last piece home, else SUCCESS
        """
        if not self.can_move(steps):
            logger.warning(
                "Invalid move attempted: %s cannot move %s steps", self, steps
            )
            return MoveResult.INVALID_MOVE

        victims = self.capture_targets(steps)
        old_position = self._position
        self._position = 0 if self.in_start_area else self._position + steps
        logger.debug("%s moved from %d to %d", self.color.value, old_position, self._position)

        for victim in victims:
            logger.info("%s knocked out %s", self, victim)
            victim.return_to_start()

        self.board.place(self, self._position)

        if victims:
            return MoveResult.KNOCKED_OUT_OPPONENT

        if self.has_arrived and self.owner is not None and self.owner.has_won():
            logger.info("All %s pieces have arrived", self.color.value)
            return MoveResult.GAME_WON

        return MoveResult.SUCCESS

    def return_to_start(self) -> None:
        """Send the piece back to its start area. Always succeeds."""
        self.board.remove(self)
        self._position = START_POSITION
        self.board.send_to_start(self)

    def place_at(self, relative_position: int) -> None:
        """
        Put the piece directly at a position.

        Only meant for match setup (restoring a snapshot, arranging a
        scenario); bypasses legality and capture rules.
        """
        validate_relative_position(relative_position)
        self._position = relative_position
        self.board.place(self, relative_position)

    def __repr__(self) -> str:
        return f"Piece({self.color.value}#{self.index} at {self._position})"
