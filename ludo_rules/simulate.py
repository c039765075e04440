"""
Ludo Rules - Headless Automated Play

Plays complete matches with every seat automated. Useful for smoke
testing the rules and for watching the automated strategy in the log.

Usage:
    python -m ludo_rules.simulate --players 4 --seed 42
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from ludo_rules.config.settings import Settings, configure_logging, get_settings
from ludo_rules.engine.base import Color, GameConfig, Phase
from ludo_rules.engine.controller import TurnController
from ludo_rules.engine.dice import Dice
from ludo_rules.engine.match import create_match
from ludo_rules.events.events import EventPayload, GameEvent
from ludo_rules.events.observers import LoggingObserver

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """
    Outcome of one automated match.

    Attributes:
        winner: Color that brought all four pieces home
        rolls: Number of dice rolls taken
        event_counts: How many times each event fired
    """
    winner: Color
    rolls: int
    event_counts: Counter = field(default_factory=Counter)

    @property
    def captures(self) -> int:
        return self.event_counts[GameEvent.PIECE_KNOCKED_OUT]


def run_match(
    num_players: int = 4,
    seed: int | None = None,
    max_rolls: int = 5000,
    verbose: bool = False,
) -> SimulationResult:
    """
    Play one match with automated players only.

    Raises:
        RuntimeError: If the match has not concluded after max_rolls rolls
    """
    controller = create_match(
        GameConfig(num_players=num_players, human_seats=frozenset()),
        dice=Dice(seed),
    )
    counts: Counter = Counter()

    def count(payload: EventPayload) -> None:
        counts[payload.event] += 1

    controller.register_observer(count)
    if verbose:
        controller.register_observer(LoggingObserver())

    controller.start()
    rolls = _play_until_concluded(controller, max_rolls)
    logger.info("%s won after %d rolls", controller.winner.value, rolls)
    return SimulationResult(winner=controller.winner, rolls=rolls, event_counts=counts)


def _play_until_concluded(controller: TurnController, max_rolls: int) -> int:
    rolls = 0
    while controller.phase != Phase.CONCLUDED:
        if rolls >= max_rolls:
            raise RuntimeError(f"Match did not finish within {max_rolls} rolls.")
        controller.roll_dice()
        rolls += 1
    return rolls


def parse_args(argv: Sequence[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(description="Play automated Ludo matches")
    parser.add_argument("--players", type=int, default=settings.num_players, choices=(2, 3, 4))
    parser.add_argument("--seed", type=int, default=settings.dice_seed)
    parser.add_argument("--games", type=int, default=1, help="Number of matches to play")
    parser.add_argument("--max-rolls", type=int, default=settings.max_rolls)
    parser.add_argument("--verbose", action="store_true", help="Log every event")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    args = parse_args(argv)

    wins: Counter = Counter()
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        result = run_match(args.players, seed, args.max_rolls, args.verbose)
        wins[result.winner] += 1
        print(
            f"Game {game + 1}: {result.winner.value} won after {result.rolls} rolls "
            f"({result.captures} captures)"
        )

    if args.games > 1:
        for color, total in wins.most_common():
            print(f"{color.value}: {total} wins")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
