"""
Ludo Rules - Match Assembly

Builds a ready-to-start TurnController from a GameConfig: one board, four
seats (inactive seats are kept but skipped), strategies per seat, and the
board's relocation reports routed onto the event channel.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ludo_rules.engine.base import SEATING_ORDER, Coordinate, GameConfig
from ludo_rules.engine.board import Board
from ludo_rules.engine.controller import TurnController
from ludo_rules.engine.dice import Dice
from ludo_rules.engine.player import Player
from ludo_rules.events.channel import EventChannel
from ludo_rules.events.events import GameEvent

if TYPE_CHECKING:
    from ludo_rules.config.settings import Settings
    from ludo_rules.engine.piece import Piece


def create_match(
    config: GameConfig | None = None,
    dice: Dice | None = None,
    channel: EventChannel | None = None,
) -> TurnController:
    """
    Assemble a match.

    Args:
        config: Seats and player count (default: 4 players, seat 0 human)
        dice: Dice to roll with (default: unseeded Dice)
        channel: Event channel presenters listen on (default: new channel)

    Returns:
        A TurnController in the SETUP phase; call start() to begin
    """
    config = config or GameConfig()
    channel = channel if channel is not None else EventChannel()

    def report_relocation(piece: Piece, coordinate: Coordinate) -> None:
        channel.notify(GameEvent.PIECE_RELOCATED, piece.color, piece=piece, coordinate=coordinate)

    board = Board(on_relocate=report_relocation)
    seats = config.active_seats
    players = [
        Player(
            color=color,
            seat=seat,
            board=board,
            is_human=seat in config.human_seats,
            is_active=seat in seats,
        )
        for seat, color in enumerate(SEATING_ORDER)
    ]

    return TurnController(players, dice or Dice(), board, channel)


def create_match_from_settings(settings: Settings) -> TurnController:
    """Assemble a match from application settings."""
    config = GameConfig(
        num_players=settings.num_players,
        human_seats=frozenset(settings.human_seats),
    )
    return create_match(config, dice=Dice(settings.dice_seed))
