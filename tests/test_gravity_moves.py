import random

import pytest

from tileblast.components.board import Board
from tileblast.components.tile_color import TileColor
from tileblast.errors import GravityInvariantError
from tileblast.systems.gravity import apply_fall, collect_fillers, holes_below, resolve_gravity
from tileblast.utils.board_format import board_from_rows

from tests.helpers import positions


def _column(holes, col):
    return [row[col] for row in holes]


def test_bottom_row_never_has_holes_below():
    board = board_from_rows(["RRR", "...", "..."])
    holes = holes_below(board)
    assert holes[0] == [0, 0, 0]
    assert holes[1] == [1, 1, 1]
    assert holes[2] == [2, 2, 2]


def test_single_gap_column_drops_top_cell_only():
    # Column 0 bottom-to-top: G, R, empty, B
    board = board_from_rows(["BYYY", ".YYY", "RYYY", "GYYY"])
    holes = holes_below(board)
    assert _column(holes, 0) == [0, 0, 1, 1]
    fillers = collect_fillers(board, holes)
    assert positions(fillers) == {(3, 0)}

    apply_fall(board, fillers, holes)
    assert board.cell_at(2, 0).color is TileColor.BLUE
    assert board.cell_at(1, 0).color is TileColor.RED
    assert board.cell_at(0, 0).color is TileColor.GREEN
    assert not board.cell_at(3, 0).occupied


def test_gaps_accumulate_up_the_column():
    # Column 0 bottom-to-top: empty, R, empty, B
    board = board_from_rows(["BYYY", ".YYY", "RYYY", ".YYY"])
    holes = holes_below(board)
    assert _column(holes, 0) == [0, 1, 1, 2]
    fillers = collect_fillers(board, holes)
    assert positions(fillers) == {(1, 0), (3, 0)}

    apply_fall(board, fillers, holes)
    assert board.cell_at(0, 0).color is TileColor.RED
    assert board.cell_at(1, 0).color is TileColor.BLUE
    assert not board.cell_at(2, 0).occupied
    assert not board.cell_at(3, 0).occupied


def test_stacked_fillers_fall_without_overwriting_each_other():
    board = board_from_rows(["GB.", "RB.", "..Y"])
    holes, fillers = resolve_gravity(board)
    assert positions(fillers) == {(1, 0), (2, 0), (1, 1), (2, 1)}
    assert [board.cell_at(r, 0).color for r in range(3)] == [TileColor.RED, TileColor.GREEN, None]
    assert [board.cell_at(r, 1).color for r in range(3)] == [TileColor.BLUE, TileColor.BLUE, None]
    assert [board.cell_at(r, 2).color for r in range(3)] == [TileColor.YELLOW, None, None]


def _random_board(rng, length, empty_ratio=0.35):
    colors = list(TileColor)[:4]
    board = Board(length=length)
    for cell in board.iter_cells():
        if rng.random() < empty_ratio:
            cell.clear()
        else:
            cell.fill(rng.choice(colors))
    return board


def test_fall_conserves_colors_and_compacts_columns():
    rng = random.Random(7)
    for _ in range(50):
        board = _random_board(rng, rng.randint(2, 9))
        before = board.color_counts()
        resolve_gravity(board)
        assert board.color_counts() == before
        for col in range(board.length):
            column = [board.cell_at(row, col).occupied for row in range(board.length)]
            # occupied cells form a contiguous run from the bottom
            assert column == sorted(column, reverse=True)
        after = holes_below(board)
        assert all(after[cell.row][cell.col] == 0 for cell in board.iter_cells() if cell.occupied)


def test_filler_order_does_not_change_result():
    rng = random.Random(11)
    for _ in range(30):
        board = _random_board(rng, rng.randint(3, 8))
        start = board.capture_state()
        holes = holes_below(board)
        fillers = collect_fillers(board, holes)
        apply_fall(board, fillers, holes)
        forward = board.capture_state()

        board.restore_state(start)
        shuffled = list(fillers)
        rng.shuffle(shuffled)
        apply_fall(board, list(reversed(shuffled)), holes)
        assert board.capture_state() == forward


def test_fall_into_occupied_slot_raises_and_leaves_board_untouched():
    board = board_from_rows(["RGB", "GBR", "BRG"])
    before = board.capture_state()
    bogus_holes = [[0, 0, 0], [0, 0, 0], [1, 0, 0]]
    with pytest.raises(GravityInvariantError) as excinfo:
        apply_fall(board, [board.cell_at(2, 0)], bogus_holes)
    assert excinfo.value.target == (1, 0)
    assert board.capture_state() == before


def test_fall_below_bottom_row_raises():
    board = board_from_rows(["R..", "...", "..."])
    before = board.capture_state()
    with pytest.raises(GravityInvariantError):
        apply_fall(board, [board.cell_at(2, 0)], [[0, 0, 0], [0, 0, 0], [3, 0, 0]])
    assert board.capture_state() == before
