"""
Ludo Rules - Board Tests

Tests for track topology (global/relative/path mapping, safe cells,
coordinates) and the occupancy index.
"""

import pytest

from ludo_rules.engine import board as topology
from ludo_rules.engine.base import Color, Coordinate, Region
from ludo_rules.engine.board import Board
from ludo_rules.engine.piece import Piece


# === Topology ===


class TestOffsets:
    """Tests for entry offsets."""

    def test_start_offsets(self):
        assert [topology.start_offset(c) for c in Color] == [1, 14, 27, 40]

    def test_path_entry_offsets(self):
        assert [topology.path_entry_offset(c) for c in Color] == [0, 13, 26, 39]

    def test_entry_cells_are_thirteen_apart(self):
        offsets = sorted(topology.START_OFFSETS.values())
        assert all(b - a == 13 for a, b in zip(offsets, offsets[1:]))


class TestIsOnTrack:
    @pytest.mark.parametrize("position,expected", [(-1, False), (0, True), (50, True), (51, False), (57, False)])
    def test_track_bounds(self, position, expected):
        assert topology.is_on_track(position) is expected


class TestGlobalPosition:
    """Tests for global_position() and its inverse."""

    def test_entry_cell(self):
        assert topology.global_position(Color.BLUE, 0) == 1
        assert topology.global_position(Color.RED, 0) == 14

    def test_wraps_around_track(self):
        assert topology.global_position(Color.YELLOW, 12) == 0
        assert topology.global_position(Color.YELLOW, 50) == 38

    @pytest.mark.parametrize("position", [-1, 51, 56, 57])
    def test_off_track_has_no_global_position(self, position):
        assert topology.global_position(Color.GREEN, position) is None

    @pytest.mark.parametrize("color", list(Color))
    def test_round_trip_for_every_track_position(self, color):
        for position in range(51):
            index = topology.global_position(color, position)
            assert 0 <= index < 52
            assert topology.relative_position(color, index) == position

    @pytest.mark.parametrize("color", list(Color))
    def test_track_positions_map_to_distinct_cells(self, color):
        cells = {topology.global_position(color, p) for p in range(51)}
        assert len(cells) == 51

    def test_shared_cell_between_colors(self):
        """Blue at 22 and red at 9 stand on the same global cell."""
        assert topology.global_position(Color.BLUE, 22) == topology.global_position(Color.RED, 9) == 23

    def test_relative_position_rejects_bad_index(self):
        with pytest.raises(ValueError, match="Global index"):
            topology.relative_position(Color.BLUE, 52)


class TestPathIndex:
    """Tests for the presenter path numbering."""

    @pytest.mark.parametrize("color", list(Color))
    def test_one_below_global_index(self, color):
        for position in range(51):
            expected = (topology.global_position(color, position) - 1) % 52
            assert topology.path_index(color, position) == expected

    def test_off_track(self):
        assert topology.path_index(Color.BLUE, -1) is None
        assert topology.path_index(Color.BLUE, 53) is None


class TestIsSafe:
    """Tests for safe-cell detection."""

    @pytest.mark.parametrize("color", list(Color))
    def test_entry_cell_is_safe(self, color):
        assert topology.is_safe(color, 0)

    @pytest.mark.parametrize("color", list(Color))
    def test_star_cell_is_safe(self, color):
        assert topology.is_safe(color, 8)

    def test_other_colors_entry_is_safe(self):
        assert topology.is_safe(Color.BLUE, 13)

    @pytest.mark.parametrize("position", [1, 5, 10, 20, 50])
    def test_plain_cells_are_not_safe(self, position):
        assert not topology.is_safe(Color.BLUE, position)

    @pytest.mark.parametrize("position", [-1, 51, 55, 57])
    def test_start_stretch_and_home_are_safe(self, position):
        assert topology.is_safe(Color.RED, position)

    def test_exactly_eight_safe_track_cells(self):
        safe = [p for p in range(51) if topology.is_safe(Color.BLUE, p)]
        assert len(safe) == 8


class TestCoordinateFor:
    """Tests for coordinate_for()."""

    def test_start_uses_slot(self):
        assert topology.coordinate_for(Color.RED, -1, slot=2) == Coordinate(Region.START, 2, Color.RED)

    def test_track_coordinate_is_colorless(self):
        assert topology.coordinate_for(Color.BLUE, 5) == Coordinate(Region.TRACK, 6)

    def test_home_stretch_is_private(self):
        blue = topology.coordinate_for(Color.BLUE, 52)
        red = topology.coordinate_for(Color.RED, 52)
        assert blue == Coordinate(Region.HOME_STRETCH, 1, Color.BLUE)
        assert blue != red

    def test_home(self):
        assert topology.coordinate_for(Color.GREEN, 57) == Coordinate(Region.HOME, 0, Color.GREEN)

    def test_invalid_position(self):
        with pytest.raises(ValueError, match="invalid"):
            topology.coordinate_for(Color.BLUE, 60)


# === Occupancy ===


class TestBoardOccupancy:
    """Tests for the Board occupancy index."""

    def test_empty_board(self, board):
        assert len(board) == 0
        assert board.occupant_at(Color.BLUE, 5) is None
        assert board.occupied_coordinates() == {}

    def test_place_records_piece(self, board):
        piece = Piece(Color.BLUE, 0, board)
        coordinate = board.place(piece, 5)
        assert coordinate == Coordinate(Region.TRACK, 6)
        assert board.occupant_at(Color.BLUE, 5) is piece
        assert board.coordinate_of(piece) == coordinate
        assert len(board) == 1

    def test_lookup_from_other_color(self, board):
        piece = Piece(Color.BLUE, 0, board)
        board.place(piece, 22)
        assert board.occupant_at(Color.RED, 9) is piece

    def test_place_vacates_previous_coordinate(self, board):
        piece = Piece(Color.BLUE, 0, board)
        board.place(piece, 5)
        board.place(piece, 8)
        assert board.occupant_at(Color.BLUE, 5) is None
        assert board.occupant_at(Color.BLUE, 8) is piece
        assert len(board) == 1

    def test_latest_arrival_reported(self, board):
        first = Piece(Color.BLUE, 0, board)
        second = Piece(Color.BLUE, 1, board)
        board.place(first, 5)
        board.place(second, 5)
        assert board.occupant_at(Color.BLUE, 5) is second
        assert board.occupants_at(Color.BLUE, 5) == [first, second]

    def test_leaving_stack_keeps_others(self, board):
        first = Piece(Color.BLUE, 0, board)
        second = Piece(Color.BLUE, 1, board)
        board.place(first, 5)
        board.place(second, 5)
        board.place(second, 7)
        assert board.occupant_at(Color.BLUE, 5) is first

    def test_start_area_not_tracked(self, board):
        piece = Piece(Color.GREEN, 3, board)
        coordinate = board.place(piece, -1)
        assert coordinate == Coordinate(Region.START, 3, Color.GREEN)
        assert board.coordinate_of(piece) is None
        assert board.occupants_at(Color.GREEN, -1) == []

    def test_remove(self, board):
        piece = Piece(Color.BLUE, 0, board)
        board.place(piece, 5)
        board.remove(piece)
        assert board.occupant_at(Color.BLUE, 5) is None
        assert len(board) == 0

    def test_remove_untracked_is_noop(self, board):
        board.remove(Piece(Color.BLUE, 0, board))
        assert len(board) == 0

    def test_send_to_start(self, board):
        piece = Piece(Color.RED, 1, board)
        board.place(piece, 20)
        coordinate = board.send_to_start(piece)
        assert coordinate == Coordinate(Region.START, 1, Color.RED)
        assert board.coordinate_of(piece) is None

    def test_clear(self, board):
        for index in range(3):
            board.place(Piece(Color.BLUE, index, board), 10 + index)
        board.clear()
        assert len(board) == 0
        assert board.occupied_coordinates() == {}

    def test_occupied_coordinates_is_a_copy(self, board):
        piece = Piece(Color.BLUE, 0, board)
        board.place(piece, 5)
        snapshot = board.occupied_coordinates()
        snapshot[Coordinate(Region.TRACK, 6)].clear()
        assert board.occupant_at(Color.BLUE, 5) is piece


class TestRelocationListener:
    """Tests for the on_relocate hook."""

    def test_called_on_place(self):
        calls = []
        board = Board(on_relocate=lambda piece, coord: calls.append((piece, coord)))
        piece = Piece(Color.BLUE, 0, board)
        board.place(piece, 0)
        assert calls == [(piece, Coordinate(Region.TRACK, 1))]

    def test_called_on_send_to_start(self):
        calls = []
        board = Board(on_relocate=lambda piece, coord: calls.append(coord))
        piece = Piece(Color.YELLOW, 2, board)
        board.place(piece, 4)
        board.send_to_start(piece)
        assert calls[-1] == Coordinate(Region.START, 2, Color.YELLOW)
