"""
Ludo Rules - Player

A color's four pieces, whether a person controls them, whether the seat
takes part in the match, and the move strategy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ludo_rules.engine.base import PIECES_PER_PLAYER, Color, ConfigurationError
from ludo_rules.engine.piece import Piece
from ludo_rules.engine.strategies import AutomatedStrategy, ManualStrategy, Strategy

if TYPE_CHECKING:
    from ludo_rules.engine.board import Board


class Player:
    """
    Represents a seat in the match.

    Human players default to the manual strategy; computer players always
    use the automated one.
    """

    def __init__(
        self,
        color: Color,
        seat: int,
        board: Board,
        is_human: bool = True,
        is_active: bool = True,
        strategy: Strategy | None = None,
    ) -> None:
        self.color = color
        self.seat = seat
        self.is_human = is_human
        self.is_active = is_active
        self.pieces: tuple[Piece, ...] = tuple(
            Piece(color, i, board, owner=self) for i in range(PIECES_PER_PLAYER)
        )
        self._strategy: Strategy | None = None
        self.strategy = strategy or (ManualStrategy() if is_human else AutomatedStrategy())

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy) -> None:
        if not self.is_human and not strategy.is_automated:
            raise ConfigurationError(
                f"Computer player {self.color.value} requires an automated strategy."
            )
        self._strategy = strategy

    def movable_pieces(self, steps: int) -> list[Piece]:
        """Pieces that can legally move by steps, in piece order."""
        return [piece for piece in self.pieces if piece.can_move(steps)]

    def has_movable_pieces(self, steps: int) -> bool:
        return any(piece.can_move(steps) for piece in self.pieces)

    def best_piece_to_move(self, steps: int) -> Piece | None:
        """Delegate the decision to the strategy."""
        return self.strategy.best_move(self, steps)

    def arrived_count(self) -> int:
        return sum(1 for piece in self.pieces if piece.has_arrived)

    def has_won(self) -> bool:
        """All four pieces have arrived home."""
        return all(piece.has_arrived for piece in self.pieces)

    def reset(self) -> None:
        """Send every piece back to the start area."""
        for piece in self.pieces:
            piece.return_to_start()

    def __repr__(self) -> str:
        kind = "human" if self.is_human else "computer"
        return f"Player({self.color.value}, seat={self.seat}, {kind}, active={self.is_active})"
