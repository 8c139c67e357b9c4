import random
from collections import Counter

import pytest

from tileblast.components.tile_color import TileColor
from tileblast.errors import UnsolvableBoardError
from tileblast.systems.solvability import ensure_solvable, has_any_legal_move, shuffle_board
from tileblast.utils.board_format import board_from_rows

CHECKERBOARD = ["RGRG", "GRGR", "RGRG", "GRGR"]


def test_detects_legal_move():
    assert has_any_legal_move(board_from_rows(["RRG", "BRG", "BBG"]))


def test_checkerboard_has_no_legal_move():
    assert not has_any_legal_move(board_from_rows(CHECKERBOARD))


def test_empty_neighbors_do_not_count_as_moves():
    assert not has_any_legal_move(board_from_rows(["R.", ".R"]))
    assert not has_any_legal_move(board_from_rows(["..", ".."]))


def test_shuffle_is_a_permutation():
    board = board_from_rows(["RRGB", "YBRG", "GGYB", "RBYY"])
    before = Counter(board.capture_state())
    shuffle_board(board, random.Random(8))
    assert Counter(board.capture_state()) == before


def test_ensure_solvable_is_noop_on_playable_board():
    board = board_from_rows(["RRG", "BRG", "BBG"])
    before = board.capture_state()
    assert ensure_solvable(board, random.Random(1)) == 0
    assert board.capture_state() == before


def test_stalemate_triggers_board_reshuffle():
    board = board_from_rows(CHECKERBOARD)
    before = board.color_counts()
    attempts = ensure_solvable(board, random.Random(1234), max_attempts=10)
    assert 1 <= attempts <= 10
    assert has_any_legal_move(board)
    assert board.color_counts() == before


def test_pathological_board_exhausts_attempts():
    # Four distinct colors on a 2x2 board can never touch a same-colored neighbor
    board = board_from_rows(["RG", "BY"])
    with pytest.raises(UnsolvableBoardError) as excinfo:
        ensure_solvable(board, random.Random(0), max_attempts=10)
    assert excinfo.value.attempts == 10
    assert excinfo.value.board_dump


def test_two_color_board_with_gaps_exhausts_attempts():
    board = board_from_rows(["R.", ".G"])
    with pytest.raises(UnsolvableBoardError):
        ensure_solvable(board, random.Random(0), max_attempts=10)
    assert Counter(color for _, color in board.capture_state()) == Counter(
        {TileColor.RED: 1, TileColor.GREEN: 1, None: 2}
    )


def test_shuffle_is_seeded_and_moves_empty_slots_too():
    rows = ["R.GB", "YBR.", "G.YB", "RBY."]
    first, second = board_from_rows(rows), board_from_rows(rows)
    shuffle_board(first, random.Random(21))
    shuffle_board(second, random.Random(21))
    assert first.capture_state() == second.capture_state()
    assert len(first.empty_cells()) == 4
