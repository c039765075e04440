"""
Ludo Rules - Engine Base Types

This module defines the enums, constants and small value objects shared by
the board, piece, player and controller modules. Value objects are frozen
dataclasses so they can be used as dictionary keys and passed to
presenters without defensive copies.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


# Relative positions
START_POSITION = -1
LAST_TRACK_POSITION = 50
HOME_STRETCH_START = 51
HOME_STRETCH_END = 56
HOME_POSITION = 57

TRACK_LENGTH = 52
PIECES_PER_PLAYER = 4
MAX_PLAYERS = 4
EXIT_ROLL = 6
DIE_FACES = 6


class Color(Enum):
    """Player colors, in seating order."""
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"

    @property
    def seat(self) -> int:
        return SEATING_ORDER.index(self)


SEATING_ORDER: tuple[Color, ...] = (Color.BLUE, Color.RED, Color.GREEN, Color.YELLOW)


class Phase(Enum):
    """Phases of the turn state machine."""
    SETUP = auto()
    AWAITING_ROLL = auto()
    AWAITING_MOVE_CHOICE = auto()
    APPLYING_MOVE = auto()
    CONCLUDED = auto()


class MoveResult(Enum):
    """Outcome of asking a piece to move."""
    SUCCESS = auto()
    INVALID_MOVE = auto()
    KNOCKED_OUT_OPPONENT = auto()
    GAME_WON = auto()


class PieceState(Enum):
    """Where a piece is along its route."""
    IN_START = "in_start"
    ON_TRACK = "on_track"
    IN_HOME_STRETCH = "in_home_stretch"
    ARRIVED = "arrived"


class Region(Enum):
    """Board regions a coordinate can belong to."""
    START = "start"
    TRACK = "track"
    HOME_STRETCH = "home_stretch"
    HOME = "home"


@dataclass(frozen=True)
class Coordinate:
    """
    Absolute board coordinate, used as the occupancy key.

    Attributes:
        region: Board region
        index: Global track index (TRACK), start slot (START),
               home-stretch step 0-5 (HOME_STRETCH) or 0 (HOME)
        color: Owning color; None for shared track cells
    """
    region: Region
    index: int
    color: Color | None = None

    def __str__(self) -> str:
        if self.color is None:
            return f"{self.region.value}[{self.index}]"
        return f"{self.color.value}:{self.region.value}[{self.index}]"


def active_seats(num_players: int) -> frozenset[int]:
    """Seats that take part in a game with the given number of players.

    Two players sit opposite each other; three players leave the third
    seat empty.
    """
    if num_players == 2:
        return frozenset({0, 2})
    if num_players == 3:
        return frozenset({0, 1, 3})
    if num_players == 4:
        return frozenset({0, 1, 2, 3})
    raise ValueError(f"Number of players must be between 2 and 4, got {num_players}.")


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a match.

    Attributes:
        num_players: Number of active players (2-4)
        human_seats: Seats controlled by a person; other seats are automated
    """
    num_players: int = 4
    human_seats: frozenset[int] = field(default_factory=lambda: frozenset({0}))

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.num_players, int) or not 2 <= self.num_players <= MAX_PLAYERS:
            raise ValueError("Number of players must be between 2 and 4.")
        object.__setattr__(self, "human_seats", frozenset(self.human_seats))
        for seat in self.human_seats:
            if not isinstance(seat, int) or not 0 <= seat < MAX_PLAYERS:
                raise ValueError(f"Human seat {seat!r} is out of range 0-{MAX_PLAYERS - 1}.")

    @property
    def active_seats(self) -> frozenset[int]:
        return active_seats(self.num_players)


class LudoError(Exception):
    """Base class for rules engine errors."""


class ConfigurationError(LudoError):
    """The match cannot be started with the given setup."""


class InternalConsistencyError(LudoError):
    """A phase-gating invariant was violated; the match state is suspect."""
