"""
Ludo Rules - Input Validation Utilities

Provides validation functions for rules engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Iterable

from ludo_rules.engine.base import (
    DIE_FACES,
    HOME_POSITION,
    MAX_PLAYERS,
    START_POSITION,
)


def validate_dice_value(value: int) -> int:
    """
    Validate a single die value.

    Args:
        value: Face value reported by the dice

    Returns:
        Validated value

    Raises:
        ValueError: If value is not an integer between 1 and 6
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Die value must be an integer, got {type(value).__name__}.")

    if not (1 <= value <= DIE_FACES):
        raise ValueError(f"Die value is {value}, must be between 1 and {DIE_FACES}.")

    return value


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Args:
        count: Number of players

    Returns:
        Validated count

    Raises:
        ValueError: If count is not 2-4
    """
    if not isinstance(count, int):
        raise ValueError(f"Player count must be an integer, got {type(count).__name__}.")

    if not (2 <= count <= MAX_PLAYERS):
        raise ValueError(f"Player count must be 2-{MAX_PLAYERS}, got {count}.")

    return count


def validate_seat_indices(seats: Iterable[int]) -> frozenset[int]:
    """
    Validate a collection of seat indices.

    Args:
        seats: Seat indices (0-3)

    Returns:
        Validated seats as a frozenset

    Raises:
        ValueError: If any seat is out of range
    """
    seats_set = frozenset(seats)

    for seat in seats_set:
        if not isinstance(seat, int):
            raise ValueError(f"Seat index must be an integer, got {type(seat).__name__}.")
        if not (0 <= seat < MAX_PLAYERS):
            raise ValueError(
                f"Seat index {seat} is out of range. Must be between 0 and {MAX_PLAYERS - 1}."
            )

    return seats_set


def validate_relative_position(position: int) -> int:
    """
    Validate a relative route position.

    Raises:
        ValueError: If position is neither the start sentinel nor 0-57
    """
    if not isinstance(position, int):
        raise ValueError(f"Position must be an integer, got {type(position).__name__}.")

    if position != START_POSITION and not (0 <= position <= HOME_POSITION):
        raise ValueError(
            f"Position {position} is invalid. Must be {START_POSITION} or 0-{HOME_POSITION}."
        )

    return position
