"""
Ludo Rules - Turn Controller

The match state machine. It owns the phase, the current seat and the last
roll, sequences roll -> move choice -> move application -> extra turn or
advance, and reports every transition on the event channel.

Phase table:

    SETUP                 before start(); accepts nothing
    AWAITING_ROLL         accepts dice_rolled(); ignores piece choices
    AWAITING_MOVE_CHOICE  accepts piece_chosen(); ignores dice rolls
    APPLYING_MOVE         transient while a move commits; accepts nothing
    CONCLUDED             a player has won; accepts nothing

Rejected input (wrong phase, wrong color, illegal piece) is ignored and
reported only through the return value. Internal-consistency faults raise
InternalConsistencyError.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ludo_rules.engine.base import (
    EXIT_ROLL,
    MAX_PLAYERS,
    Color,
    ConfigurationError,
    InternalConsistencyError,
    MoveResult,
    Phase,
    active_seats,
)
from ludo_rules.engine.board import Board
from ludo_rules.engine.dice import Dice
from ludo_rules.engine.piece import Piece
from ludo_rules.engine.player import Player
from ludo_rules.engine.validators import validate_dice_value, validate_player_count
from ludo_rules.events.channel import EventChannel, Observer
from ludo_rules.events.events import GameEvent

logger = logging.getLogger(__name__)


class TurnController:
    """
    Runs one match.

    Collaborators are passed in rather than looked up: presenters register
    on the channel, the dice supply values, the board tracks occupancy.
    """

    def __init__(
        self,
        players: Sequence[Player],
        dice: Dice | None,
        board: Board | None,
        channel: EventChannel | None = None,
    ) -> None:
        self.players: list[Player] = list(players or [])
        self.dice = dice
        self.board = board
        self.channel = channel if channel is not None else EventChannel()

        self._phase = Phase.SETUP
        self._current_index = 0
        self._last_roll: int | None = None
        self._roll_pending = False
        self._winner: Color | None = None

    # -- Accessors -------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def current_player_index(self) -> int:
        return self._current_index

    @property
    def current_player(self) -> Player:
        return self.players[self._current_index]

    @property
    def current_color(self) -> Color:
        return self.current_player.color

    @property
    def last_roll(self) -> int | None:
        return self._last_roll

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def active_players(self) -> list[Player]:
        return [player for player in self.players if player.is_active]

    @property
    def number_of_players(self) -> int:
        return len(self.active_players)

    def get_player(self, color: Color) -> Player | None:
        for player in self.players:
            if player.color == color:
                return player
        return None

    def is_current_player_turn(self, color: Color) -> bool:
        return self._phase not in (Phase.SETUP, Phase.CONCLUDED) and self.current_color == color

    def has_winning_condition(self, color: Color) -> bool:
        player = self.get_player(color)
        return player is not None and player.has_won()

    # -- Observers -------------------------------------------------------

    def register_observer(self, observer: Observer) -> None:
        self.channel.register(observer)

    def unregister_observer(self, observer: Observer) -> None:
        self.channel.unregister(observer)

    # -- Lifecycle -------------------------------------------------------

    def validate_setup(self) -> None:
        """
        Check that the match can start.

        Raises:
            ConfigurationError: If players, dice or board are missing, or
                fewer than two seats are active
        """
        if not self.players:
            raise ConfigurationError("No players configured.")
        if len(self.players) > MAX_PLAYERS:
            raise ConfigurationError(f"At most {MAX_PLAYERS} players are supported.")
        if self.dice is None:
            raise ConfigurationError("No dice configured.")
        if self.board is None:
            raise ConfigurationError("No board configured.")
        if len({player.color for player in self.players}) != len(self.players):
            raise ConfigurationError("Each player needs a distinct color.")
        if len(self.active_players) < 2:
            raise ConfigurationError("At least two active players are required.")

    def start(self) -> None:
        """Begin the match with the first active seat to roll."""
        if self._phase != Phase.SETUP:
            logger.debug("start() ignored in phase %s", self._phase.name)
            return

        self.validate_setup()
        self._current_index = self._first_active_index()
        self._change_phase(Phase.AWAITING_ROLL)
        logger.info("Match started. Current player: %s", self.current_color.value)
        self.channel.notify(GameEvent.TURN_CHANGED, self.current_color)

    def restart(self) -> None:
        """Send every piece home, reset turn state and begin again."""
        if self._phase == Phase.SETUP:
            self.start()
            return

        logger.info("Restarting match")
        for player in self.players:
            player.reset()
        self.board.clear()

        self._current_index = self._first_active_index()
        self._last_roll = None
        self._roll_pending = False
        self._winner = None
        self._change_phase(Phase.AWAITING_ROLL)
        self.channel.notify(GameEvent.GAME_RESTARTED, self.current_color)
        self.channel.notify(GameEvent.TURN_CHANGED, self.current_color)

    def set_number_of_players(self, count: int) -> None:
        """
        Re-seat the match for 2-4 players.

        Only allowed before the match starts or after it concludes; the
        seats taking part follow the fixed activation pattern.
        """
        validate_player_count(count)
        if self._phase not in (Phase.SETUP, Phase.CONCLUDED):
            raise ConfigurationError("Player count can only change between matches.")

        seats = active_seats(count)
        for player in self.players:
            player.is_active = player.seat in seats
            logger.debug("Seat %d (%s) active: %s", player.seat, player.color.value, player.is_active)

        if self._phase == Phase.CONCLUDED:
            self.restart()

    def load_turn_state(
        self,
        phase: Phase,
        current_player_index: int,
        last_roll: int | None = None,
        winner: Color | None = None,
    ) -> None:
        """
        Overwrite the turn state when resuming a saved match.

        Only resting phases can be loaded; no pending roll is carried over.

        Raises:
            ConfigurationError: If the phase is transient or the seat is
                missing or inactive
        """
        if phase not in (Phase.SETUP, Phase.AWAITING_ROLL, Phase.CONCLUDED):
            raise ConfigurationError(f"Cannot resume a match in phase {phase.name}.")
        if not 0 <= current_player_index < len(self.players):
            raise ConfigurationError(f"Seat {current_player_index} does not exist.")
        if phase == Phase.AWAITING_ROLL and not self.players[current_player_index].is_active:
            raise ConfigurationError(f"Seat {current_player_index} is not active.")

        self._current_index = current_player_index
        self._last_roll = last_roll
        self._roll_pending = False
        self._winner = winner
        self._phase = phase

    # -- Dice ------------------------------------------------------------

    def roll_dice(self) -> int | None:
        """Roll the dice for the current player, if a roll is expected."""
        if self._phase != Phase.AWAITING_ROLL:
            logger.debug("Dice roll ignored in phase %s", self._phase.name)
            return None

        value = self.dice.roll()
        self.dice_rolled(value, self.current_color)
        return value

    def dice_rolled(self, value: int, color: Color | None = None) -> bool:
        """
        Handle a roll reported by the dice.

        Args:
            value: Die value 1-6
            color: Color the roll was made for; rolls for another color
                than the current player are rejected, as are rolls
                reported while the previous one is still being handled

        Returns:
            True if the roll was accepted
        """
        if self._phase != Phase.AWAITING_ROLL:
            logger.debug("Dice roll %s ignored in phase %s", value, self._phase.name)
            return False
        if self._roll_pending:
            logger.debug("Dice roll %s ignored, roll %s is still being handled", value, self._last_roll)
            return False
        if color is not None and color != self.current_color:
            logger.debug("Dice roll for %s ignored, %s is playing", color.value, self.current_color.value)
            return False

        validate_dice_value(value)
        self._last_roll = value
        self._roll_pending = True
        player = self.current_player
        logger.debug("%s rolled %d", player.color.value, value)
        self.channel.notify(GameEvent.DICE_ROLLED, player.color, value=value)

        if not player.has_movable_pieces(value):
            logger.debug("%s has no movable pieces for %d", player.color.value, value)
            self.end_turn()
            return True

        player.strategy.take_turn(player, value, self)
        return True

    # -- Move selection --------------------------------------------------

    def enable_piece_selection(self, player: Player, steps: int) -> None:
        """Wait for a person to pick one of the player's movable pieces."""
        if self._phase != Phase.AWAITING_ROLL or not self._roll_pending:
            logger.debug("Piece selection not opened in phase %s", self._phase.name)
            return
        if player is not self.current_player:
            return

        pieces = player.movable_pieces(steps)
        self._change_phase(Phase.AWAITING_MOVE_CHOICE)
        logger.debug("%d pieces can be moved", len(pieces))
        self.channel.notify(GameEvent.HIGHLIGHTS_ENABLED, player.color, pieces=pieces, steps=steps)

    def piece_chosen(self, piece: Piece) -> MoveResult | None:
        """
        Handle a piece picked by a person.

        Returns:
            The move result, or None when the choice was rejected
        """
        if self._phase != Phase.AWAITING_MOVE_CHOICE:
            logger.debug("Piece choice ignored in phase %s", self._phase.name)
            return None
        if piece.color != self.current_color or not piece.can_move(self._last_roll):
            logger.debug("Piece choice %s rejected for roll %s", piece, self._last_roll)
            return None

        return self.apply_move(piece, self._last_roll)

    def apply_move(self, piece: Piece, steps: int) -> MoveResult | None:
        """
        Commit a move for the current player.

        Used for both manual choices and automated decisions. The move
        must use the pending roll and belong to the current player.

        Returns:
            The move result, or None when the move was rejected

        Raises:
            InternalConsistencyError: If a move that passed the checks is
                refused by the piece itself
        """
        if self._phase not in (Phase.AWAITING_ROLL, Phase.AWAITING_MOVE_CHOICE):
            logger.debug("Move ignored in phase %s", self._phase.name)
            return None
        if not self._roll_pending or steps != self._last_roll:
            logger.debug("Move of %s steps ignored, pending roll is %s", steps, self._last_roll)
            return None
        if piece.color != self.current_color:
            logger.warning(
                "Attempted to move piece of wrong color. Expected: %s, Got: %s",
                self.current_color.value, piece.color.value,
            )
            return None
        if not piece.can_move(steps):
            logger.warning("Invalid move attempted. %s cannot move %d steps", piece, steps)
            return None

        self._change_phase(Phase.APPLYING_MOVE)
        self._roll_pending = False
        victims = piece.capture_targets(steps)
        result = piece.move(steps)
        logger.debug("Move result: %s", result.name)

        if result == MoveResult.INVALID_MOVE:
            self._change_phase(Phase.AWAITING_ROLL)
            logger.error("Move was validated but still returned InvalidMove for %s", piece)
            raise InternalConsistencyError(f"{piece} refused a move of {steps} that passed validation.")

        self.channel.notify(GameEvent.PIECE_MOVED, piece.color, piece=piece, steps=steps, result=result)

        if result == MoveResult.KNOCKED_OUT_OPPONENT:
            for victim in victims:
                self.channel.notify(
                    GameEvent.PIECE_KNOCKED_OUT, piece.color, knocked=victim, attacker=piece
                )

        if result == MoveResult.GAME_WON:
            self._winner = piece.color
            self._change_phase(Phase.CONCLUDED)
            logger.info("Game won by %s", piece.color.value)
            self.channel.notify(GameEvent.GAME_WON, piece.color)
            return result

        if self._should_continue_turn(steps, result):
            logger.debug("%s plays again", piece.color.value)
            self._change_phase(Phase.AWAITING_ROLL)
        else:
            self.end_turn()

        return result

    # -- Turn advancement ------------------------------------------------

    def end_turn(self) -> None:
        """
        Pass the turn to the next active seat.

        Raises:
            InternalConsistencyError: If no other active seat exists
        """
        if self._phase in (Phase.SETUP, Phase.CONCLUDED):
            logger.debug("end_turn() ignored in phase %s", self._phase.name)
            return

        self._roll_pending = False
        self._current_index = self._next_active_index(self._current_index)
        self._change_phase(Phase.AWAITING_ROLL)
        logger.debug("Turn ended. New current player: %s", self.current_color.value)
        self.channel.notify(GameEvent.TURN_CHANGED, self.current_color)

    @staticmethod
    def _should_continue_turn(steps: int, result: MoveResult) -> bool:
        return steps == EXIT_ROLL or result == MoveResult.KNOCKED_OUT_OPPONENT

    def _next_active_index(self, start: int) -> int:
        count = len(self.players)
        index = start
        while True:
            index = (index + 1) % count
            if index == start:
                logger.error("No active players found!")
                raise InternalConsistencyError("Turn advancement found no other active player.")
            if self.players[index].is_active:
                return index

    def _first_active_index(self) -> int:
        for index, player in enumerate(self.players):
            if player.is_active:
                return index
        raise ConfigurationError("No active players configured.")

    def _change_phase(self, new_phase: Phase) -> None:
        old_phase = self._phase
        if old_phase == new_phase:
            return

        self._phase = new_phase
        logger.debug("State change from %s to %s", old_phase.name, new_phase.name)
        if old_phase == Phase.AWAITING_MOVE_CHOICE:
            self.channel.notify(GameEvent.HIGHLIGHTS_CLEARED, self.current_color)
        self.channel.notify(GameEvent.PHASE_CHANGED, self.current_color, old=old_phase, new=new_phase)
