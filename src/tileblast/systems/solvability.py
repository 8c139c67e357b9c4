from __future__ import annotations

import logging
import random

from tileblast.components.board import Board
from tileblast.constants import SHUFFLE_LIMIT
from tileblast.errors import UnsolvableBoardError
from tileblast.utils.board_format import format_board

logger = logging.getLogger(__name__)


def has_any_legal_move(board: Board) -> bool:
    """True iff some occupied cell has a same-colored occupied 4-neighbor."""
    for cell in board.iter_cells():
        if not cell.occupied:
            continue
        for row, col in board.neighbors4(cell.row, cell.col):
            neighbor = board.cells[row][col]
            if neighbor.occupied and neighbor.color is cell.color:
                return True
    return False


def shuffle_board(board: Board, rng: random.Random) -> None:
    """Randomly permute the existing cell states across every position.

    The multiset of colors is preserved; nothing is redrawn.
    """
    states = board.capture_state()
    rng.shuffle(states)
    board.restore_state(states)


def ensure_solvable(board: Board, rng: random.Random, max_attempts: int = SHUFFLE_LIMIT) -> int:
    """Shuffle until a legal move exists, returning the number of shuffles used.

    Raises :class:`UnsolvableBoardError` once ``max_attempts`` shuffles have
    all failed.
    """
    if has_any_legal_move(board):
        return 0
    logger.debug("No legal move on board, shuffling:\n%s", format_board(board))
    for attempt in range(1, max_attempts + 1):
        shuffle_board(board, rng)
        if has_any_legal_move(board):
            logger.debug("Board resolved after %d shuffle(s)", attempt)
            return attempt
    dump = format_board(board)
    logger.error("Board is locked after %d shuffle attempts:\n%s", max_attempts, dump)
    raise UnsolvableBoardError(max_attempts, dump)
