from __future__ import annotations

from typing import Iterable, List, Optional

from tileblast.components.board import Board
from tileblast.components.tile_color import TileColor

EMPTY_MARK = "."


def format_board(board: Board) -> str:
    """Render a board as text, top row first, one letter per cell."""
    lines: List[str] = []
    for row in range(board.length - 1, -1, -1):
        lines.append(" ".join(_mark(cell.color) for cell in board.cells[row]))
    return "\n".join(lines)


def board_from_rows(rows: Iterable[Iterable[Optional[str]]]) -> Board:
    """Build a board from letter rows given top row first (``None``/``"."`` for empty)."""
    top_first = [list(row) for row in rows]
    length = len(top_first)
    board = Board(length=length)
    for offset, letters in enumerate(top_first):
        if len(letters) != length:
            raise ValueError("Board rows must form a square")
        row = length - 1 - offset
        for col, letter in enumerate(letters):
            if letter is None or letter == EMPTY_MARK:
                board.cells[row][col].clear()
            else:
                board.cells[row][col].fill(TileColor(letter))
    return board


def _mark(color: Optional[TileColor]) -> str:
    return color.letter if color is not None else EMPTY_MARK
