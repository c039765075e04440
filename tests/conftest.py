"""
Ludo Rules - Test Configuration and Fixtures

Common fixtures and test doubles for all test modules.
"""

from typing import Callable, Iterable

import pytest

from ludo_rules.engine.base import Color, GameConfig
from ludo_rules.engine.board import Board
from ludo_rules.engine.controller import TurnController
from ludo_rules.engine.dice import Dice
from ludo_rules.engine.match import create_match
from ludo_rules.engine.player import Player
from ludo_rules.events.channel import EventChannel
from ludo_rules.events.observers import EventRecorder


class FixedDice(Dice):
    """Dice that return scripted values in order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(seed=0)
        self.values = list(values)

    def queue(self, *values: int) -> None:
        self.values.extend(values)

    def roll(self) -> int:
        if not self.values:
            raise AssertionError("FixedDice ran out of scripted values")
        self.last_rolled_value = self.values.pop(0)
        return self.last_rolled_value


# =============================================================================
# BOARD AND PLAYERS
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Empty board with no relocation listener."""
    return Board()


@pytest.fixture
def players(board: Board) -> dict[Color, Player]:
    """One human player per color on the shared board."""
    return {
        color: Player(color, seat, board)
        for seat, color in enumerate((Color.BLUE, Color.RED, Color.GREEN, Color.YELLOW))
    }


@pytest.fixture
def blue(players: dict[Color, Player]) -> Player:
    return players[Color.BLUE]


@pytest.fixture
def red(players: dict[Color, Player]) -> Player:
    return players[Color.RED]


@pytest.fixture
def green(players: dict[Color, Player]) -> Player:
    return players[Color.GREEN]


# =============================================================================
# MATCHES
# =============================================================================

@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def make_match(recorder: EventRecorder) -> Callable[..., TurnController]:
    """
    Factory for matches with scripted dice and an event recorder attached.

    Args (of the returned callable):
        num_players: 2-4
        human_seats: seats controlled manually
        rolls: scripted dice values
        start: whether to call start() before returning
    """

    def _make(
        num_players: int = 4,
        human_seats: Iterable[int] = (0, 1, 2, 3),
        rolls: Iterable[int] = (),
        start: bool = True,
    ) -> TurnController:
        channel = EventChannel()
        channel.register(recorder)
        controller = create_match(
            GameConfig(num_players=num_players, human_seats=frozenset(human_seats)),
            dice=FixedDice(rolls),
            channel=channel,
        )
        if start:
            controller.start()
        recorder.clear()
        return controller

    return _make
