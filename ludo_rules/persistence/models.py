"""
Ludo Rules - Snapshot Models

Pydantic models that mirror the state of a running match. Storing them
(file, database, network) is up to the caller.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from ludo_rules.engine.base import HOME_POSITION, PIECES_PER_PLAYER, START_POSITION, Color, Phase
from ludo_rules.engine.strategies import STRATEGIES
from ludo_rules.engine.validators import validate_relative_position


class PlayerRecord(BaseModel):
    """One seat and the relative positions of its pieces."""

    color: Color
    seat: int = Field(ge=0, le=3)
    is_human: bool = True
    is_active: bool = True
    strategy: str = "manual"
    positions: list[int] = Field(min_length=PIECES_PER_PLAYER, max_length=PIECES_PER_PLAYER)

    model_config = {"from_attributes": True}

    @field_validator("strategy")
    @classmethod
    def _check_strategy(cls, value: str) -> str:
        key = value.lower()
        if key not in STRATEGIES:
            raise ValueError(f"Unknown strategy '{value}'. Available: {list(STRATEGIES)}")
        return key

    @field_validator("positions")
    @classmethod
    def _check_positions(cls, value: list[int]) -> list[int]:
        return [validate_relative_position(position) for position in value]

    @model_validator(mode="after")
    def _check_computer_strategy(self) -> "PlayerRecord":
        if not self.is_human and not STRATEGIES[self.strategy].is_automated:
            raise ValueError(f"Computer player {self.color.value} requires an automated strategy.")
        return self

    @property
    def arrived(self) -> int:
        return sum(1 for position in self.positions if position >= HOME_POSITION)

    @property
    def in_start(self) -> int:
        return sum(1 for position in self.positions if position == START_POSITION)


class MatchSnapshot(BaseModel):
    """Complete turn and board state of a match."""

    phase: Phase
    current_player_index: int = Field(ge=0, le=3)
    last_roll: int | None = Field(default=None, ge=1, le=6)
    winner: Color | None = None
    players: list[PlayerRecord]

    model_config = {"from_attributes": True}
