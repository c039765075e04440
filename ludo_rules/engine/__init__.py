"""
Ludo Rules Engine.

Pure Python rules for a four-color Ludo variant with zero UI dependencies.
Handles movement legality, captures, turn sequencing and the automated
opponent.
"""

from ludo_rules.engine.base import (
    HOME_POSITION,
    START_POSITION,
    Color,
    ConfigurationError,
    Coordinate,
    GameConfig,
    InternalConsistencyError,
    LudoError,
    MoveResult,
    PieceState,
    Phase,
    Region,
)
from ludo_rules.engine.board import Board
from ludo_rules.engine.controller import TurnController
from ludo_rules.engine.dice import Dice
from ludo_rules.engine.match import create_match, create_match_from_settings
from ludo_rules.engine.piece import Piece
from ludo_rules.engine.player import Player
from ludo_rules.engine.strategies import AutomatedStrategy, ManualStrategy, Strategy

__all__ = [
    # Constants
    "HOME_POSITION",
    "START_POSITION",
    # Enums and value objects
    "Color",
    "Coordinate",
    "GameConfig",
    "MoveResult",
    "Phase",
    "PieceState",
    "Region",
    # Errors
    "ConfigurationError",
    "InternalConsistencyError",
    "LudoError",
    # Rules
    "Board",
    "Dice",
    "Piece",
    "Player",
    "Strategy",
    "ManualStrategy",
    "AutomatedStrategy",
    "TurnController",
    "create_match",
    "create_match_from_settings",
]
