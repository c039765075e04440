"""
Ludo Rules - Move Strategies

Exactly two move-selection behaviours exist:

    - ManualStrategy: a person picks the piece; the controller is asked
      to open piece selection and the choice arrives later through
      TurnController.piece_chosen().
    - AutomatedStrategy: the piece is chosen immediately by a fixed
      priority rule and applied through TurnController.apply_move().
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ludo_rules.engine.base import EXIT_ROLL

if TYPE_CHECKING:
    from ludo_rules.engine.controller import TurnController
    from ludo_rules.engine.piece import Piece
    from ludo_rules.engine.player import Player

logger = logging.getLogger(__name__)


class Strategy(ABC):
    """Decides how a player's move gets chosen."""

    name: str = ""
    is_automated: bool = False

    @abstractmethod
    def take_turn(self, player: Player, steps: int, controller: TurnController) -> None:
        """Act on a roll that left the player with at least one legal move."""

    @abstractmethod
    def best_move(self, player: Player, steps: int) -> Piece | None:
        """Piece this strategy would move, or None."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ManualStrategy(Strategy):
    """Defers the choice to a person."""

    name = "manual"

    def take_turn(self, player: Player, steps: int, controller: TurnController) -> None:
        logger.debug("%s awaits a piece selection for %d", player.color.value, steps)
        controller.enable_piece_selection(player, steps)

    def best_move(self, player: Player, steps: int) -> Piece | None:
        return None


class AutomatedStrategy(Strategy):
    """
    Picks a move by priority, first match wins:

        1. With a six, bring a piece out of the start area.
        2. Capture an opponent.
        3. Advance the piece closest to home (earliest piece on ties).
    """

    name = "automated"
    is_automated = True

    def take_turn(self, player: Player, steps: int, controller: TurnController) -> None:
        piece = self.best_move(player, steps)
        if piece is None:
            logger.debug("%s has no move for %d, ending turn", player.color.value, steps)
            controller.end_turn()
            return
        controller.apply_move(piece, steps)

    def best_move(self, player: Player, steps: int) -> Piece | None:
        movable = player.movable_pieces(steps)
        if not movable:
            return None

        if steps == EXIT_ROLL:
            for piece in movable:
                if piece.in_start_area:
                    logger.debug("Priority 1: %s leaves start", piece)
                    return piece

        for piece in movable:
            if piece.would_capture(steps):
                logger.debug("Priority 2: %s can capture", piece)
                return piece

        # max() keeps the first of equal keys
        piece = max(movable, key=lambda p: p.relative_position)
        logger.debug("Priority 3: %s is closest to home", piece)
        return piece


STRATEGIES: dict[str, type[Strategy]] = {
    ManualStrategy.name: ManualStrategy,
    AutomatedStrategy.name: AutomatedStrategy,
}


def create_strategy(name: str) -> Strategy:
    """
    Create a strategy instance by name.

    Raises:
        ValueError: If strategy name is not recognized
    """
    key = name.lower()
    if key not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{name}'. Available: {list(STRATEGIES)}")
    return STRATEGIES[key]()
