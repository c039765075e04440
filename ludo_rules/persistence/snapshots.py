"""
Ludo Rules - Snapshot Capture and Restore

Converts a TurnController to a MatchSnapshot and back.
"""

from __future__ import annotations

import logging

from ludo_rules.engine.base import ConfigurationError, Phase
from ludo_rules.engine.controller import TurnController
from ludo_rules.engine.strategies import STRATEGIES, create_strategy
from ludo_rules.persistence.models import MatchSnapshot, PlayerRecord

logger = logging.getLogger(__name__)

# Transient phases are stored as the phase they resolve to
_RESTORABLE_PHASES = {
    Phase.SETUP: Phase.SETUP,
    Phase.AWAITING_ROLL: Phase.AWAITING_ROLL,
    Phase.AWAITING_MOVE_CHOICE: Phase.AWAITING_ROLL,
    Phase.APPLYING_MOVE: Phase.AWAITING_ROLL,
    Phase.CONCLUDED: Phase.CONCLUDED,
}


def capture_snapshot(controller: TurnController) -> MatchSnapshot:
    """Record the current match state."""
    players = [
        PlayerRecord(
            color=player.color,
            seat=player.seat,
            is_human=player.is_human,
            is_active=player.is_active,
            strategy=player.strategy.name,
            positions=[piece.relative_position for piece in player.pieces],
        )
        for player in controller.players
    ]
    return MatchSnapshot(
        phase=controller.phase,
        current_player_index=controller.current_player_index,
        last_roll=controller.last_roll,
        winner=controller.winner,
        players=players,
    )


def restore_snapshot(controller: TurnController, snapshot: MatchSnapshot) -> None:
    """
    Load a snapshot into a controller built for the same seats.

    A match saved while waiting for a move choice resumes waiting for a
    roll; the pending roll is not kept.

    The snapshot is checked in full before anything changes, so a
    rejected snapshot leaves the match as it was.

    Raises:
        ConfigurationError: If the snapshot's seats do not match the
            controller's players, a computer seat has a manual strategy,
            or the seat to play is missing or inactive
    """
    _check_restorable(controller, snapshot)
    phase = _RESTORABLE_PHASES[snapshot.phase]
    by_color = {player.color: player for player in controller.players}

    controller.board.clear()
    for record in snapshot.players:
        player = by_color[record.color]
        player.is_human = record.is_human
        player.is_active = record.is_active
        player.strategy = create_strategy(record.strategy)
        for piece, position in zip(player.pieces, record.positions):
            piece.place_at(position)

    controller.load_turn_state(
        phase=phase,
        current_player_index=snapshot.current_player_index,
        last_roll=snapshot.last_roll,
        winner=snapshot.winner,
    )
    logger.info(
        "Restored match at phase %s, %s to play",
        controller.phase.name, controller.current_color.value,
    )


def _check_restorable(controller: TurnController, snapshot: MatchSnapshot) -> None:
    records = {record.color: record for record in snapshot.players}
    if len(records) != len(snapshot.players) or set(records) != {p.color for p in controller.players}:
        raise ConfigurationError("Snapshot seats do not match the match's players.")

    for record in snapshot.players:
        strategy = STRATEGIES.get(record.strategy.lower())
        if strategy is None:
            raise ConfigurationError(f"Unknown strategy '{record.strategy}' for {record.color.value}.")
        if not record.is_human and not strategy.is_automated:
            raise ConfigurationError(
                f"Computer player {record.color.value} requires an automated strategy."
            )

    index = snapshot.current_player_index
    if not 0 <= index < len(controller.players):
        raise ConfigurationError(f"Seat {index} does not exist.")
    current = records[controller.players[index].color]
    if _RESTORABLE_PHASES[snapshot.phase] == Phase.AWAITING_ROLL and not current.is_active:
        raise ConfigurationError(f"Seat {index} is not active.")
