"""
Ludo Rules - Board Topology

Pure functions that map a color and a relative route position onto the
shared 52-cell track, plus the Board class that keeps the occupancy index
("who is standing on this coordinate").

Two numbering schemes exist for the shared track:

    - Global track index: START_OFFSETS, used for occupancy, capture
      and safe-cell tests. Blue enters the track at global index 1.
    - Path index: PATH_ENTRY_OFFSETS, the 0-based index into a
      presenter's array of track cells. Always one less than the global
      index, modulo 52.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from ludo_rules.engine.base import (
    HOME_POSITION,
    HOME_STRETCH_START,
    LAST_TRACK_POSITION,
    START_POSITION,
    TRACK_LENGTH,
    Color,
    Coordinate,
    Region,
)
from ludo_rules.engine.validators import validate_relative_position

if TYPE_CHECKING:
    from ludo_rules.engine.piece import Piece

logger = logging.getLogger(__name__)


START_OFFSETS: dict[Color, int] = {
    Color.BLUE: 1,
    Color.RED: 14,
    Color.GREEN: 27,
    Color.YELLOW: 40,
}

PATH_ENTRY_OFFSETS: dict[Color, int] = {
    Color.BLUE: 0,
    Color.RED: 13,
    Color.GREEN: 26,
    Color.YELLOW: 39,
}

# Entry cells plus the star cell eight steps after each of them
SAFE_INDICES: frozenset[int] = frozenset({1, 9, 14, 22, 27, 35, 40, 48})


def start_offset(color: Color) -> int:
    """Global track index where a color's pieces enter the track."""
    return START_OFFSETS[color]


def path_entry_offset(color: Color) -> int:
    """Path-array index where a color's pieces enter the track."""
    return PATH_ENTRY_OFFSETS[color]


def is_on_track(relative_position: int) -> bool:
    return 0 <= relative_position <= LAST_TRACK_POSITION


def global_position(color: Color, relative_position: int) -> int | None:
    """
    Map a relative position onto the shared track.

    Args:
        color: Owner color
        relative_position: Progress from the color's own entry cell

    Returns:
        Global track index 0-51, or None when the position is not on
        the shared track (start area, home stretch, home)
    """
    if not is_on_track(relative_position):
        return None
    return (relative_position + START_OFFSETS[color]) % TRACK_LENGTH


def relative_position(color: Color, global_index: int) -> int:
    """Inverse of global_position for shared track cells."""
    if not 0 <= global_index < TRACK_LENGTH:
        raise ValueError(f"Global index must be 0-{TRACK_LENGTH - 1}, got {global_index}.")
    return (global_index - START_OFFSETS[color]) % TRACK_LENGTH


def path_index(color: Color, relative_position: int) -> int | None:
    """Presenter path-array index for a shared track position."""
    if not is_on_track(relative_position):
        return None
    return (relative_position + PATH_ENTRY_OFFSETS[color]) % TRACK_LENGTH


def is_safe(color: Color, relative_position: int) -> bool:
    """
    Check whether a piece of this color is safe from capture here.

    The start area, the home stretch and home are always safe; on the
    shared track only SAFE_INDICES are.
    """
    if relative_position == START_POSITION or relative_position >= HOME_STRETCH_START:
        return True
    return global_position(color, relative_position) in SAFE_INDICES


def coordinate_for(color: Color, relative_position: int, slot: int = 0) -> Coordinate:
    """
    Absolute coordinate of a relative position.

    Args:
        color: Owner color
        relative_position: -1 to 57
        slot: Start-area slot, only used for the start position

    Returns:
        Coordinate usable as an occupancy key
    """
    validate_relative_position(relative_position)

    if relative_position == START_POSITION:
        return Coordinate(Region.START, slot, color)
    if relative_position >= HOME_POSITION:
        return Coordinate(Region.HOME, 0, color)
    if relative_position >= HOME_STRETCH_START:
        return Coordinate(Region.HOME_STRETCH, relative_position - HOME_STRETCH_START, color)
    return Coordinate(Region.TRACK, global_position(color, relative_position))


RelocationListener = Callable[["Piece", Coordinate], None]


class Board:
    """
    Occupancy index for one match.

    Each coordinate keeps its pieces in arrival order; occupant_at reports
    the latest arrival. Several pieces may share a cell (own-color stacks,
    opponents on a safe cell), and a capture sends back every opposing
    piece there, so a single occupant per cell is not enough. Pieces in
    their start area are not tracked.
    """

    def __init__(self, on_relocate: RelocationListener | None = None) -> None:
        self._occupants: dict[Coordinate, list[Piece]] = {}
        self._locations: dict[Piece, Coordinate] = {}
        self.on_relocate = on_relocate

    def occupants_at(self, color: Color, relative_position: int) -> list[Piece]:
        """All tracked pieces at the coordinate, oldest first."""
        if relative_position == START_POSITION:
            return []
        coordinate = coordinate_for(color, relative_position)
        return list(self._occupants.get(coordinate, ()))

    def occupant_at(self, color: Color, relative_position: int) -> Piece | None:
        """The piece most recently placed at the coordinate, if any."""
        occupants = self.occupants_at(color, relative_position)
        return occupants[-1] if occupants else None

    def coordinate_of(self, piece: Piece) -> Coordinate | None:
        return self._locations.get(piece)

    def place(self, piece: Piece, relative_position: int) -> Coordinate:
        """
        Move a piece's occupancy record to a new position.

        The piece's previous record is vacated first, so placing is
        idempotent. Placing at the start position only vacates.

        Returns:
            The coordinate the piece now occupies (its start slot when
            relative_position is the start position)
        """
        coordinate = coordinate_for(piece.color, relative_position, slot=piece.index)
        self.remove(piece)

        if relative_position != START_POSITION:
            self._occupants.setdefault(coordinate, []).append(piece)
            self._locations[piece] = coordinate
            logger.debug("Placed %s at %s", piece, coordinate)

        self._relocate(piece, coordinate)
        return coordinate

    def remove(self, piece: Piece) -> None:
        """Delete any occupancy record keyed to the piece."""
        coordinate = self._locations.pop(piece, None)
        if coordinate is None:
            return

        occupants = self._occupants.get(coordinate, [])
        if piece in occupants:
            occupants.remove(piece)
        if not occupants:
            self._occupants.pop(coordinate, None)
        logger.debug("Removed %s from %s", piece, coordinate)

    def send_to_start(self, piece: Piece) -> Coordinate:
        """Vacate the piece's record and relocate it to its start slot."""
        return self.place(piece, START_POSITION)

    def occupied_coordinates(self) -> dict[Coordinate, list[Piece]]:
        """Snapshot of the occupancy index."""
        return {coord: list(pieces) for coord, pieces in self._occupants.items()}

    def clear(self) -> None:
        self._occupants.clear()
        self._locations.clear()

    def _relocate(self, piece: Piece, coordinate: Coordinate) -> None:
        if self.on_relocate is not None:
            self.on_relocate(piece, coordinate)

    def __len__(self) -> int:
        return len(self._locations)
