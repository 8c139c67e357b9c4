from __future__ import annotations

import random
from typing import List, Optional, Sequence

from tileblast.components.board import Board
from tileblast.components.cell import Cell
from tileblast.components.tile_color import TileColor


def populate_refill(
    board: Board,
    palette: Sequence[TileColor],
    rng: random.Random,
    refill: Optional[Board] = None,
) -> Board:
    """Build the refill board: the exact complement of the holes in ``board``.

    Empty main positions become occupied with a uniformly drawn palette color
    (drawn row-major, bottom row first); occupied main positions stay empty.
    Passing an existing ``refill`` board reuses its cells.
    """
    if not palette:
        raise ValueError("Refill palette must contain at least one color")
    if refill is None:
        refill = Board(length=board.length)
    elif refill.length != board.length:
        raise ValueError("Refill board must match the main board size")
    for main_cell, refill_cell in zip(board.iter_cells(), refill.iter_cells()):
        if main_cell.occupied:
            refill_cell.clear()
        else:
            refill_cell.fill(rng.choice(palette))
    return refill


def merge_refill_into_main(board: Board, refill: Board) -> List[Cell]:
    """Fill every empty main cell with the refill color at the same position.

    Returns the main-board cells that were filled.
    """
    filled: List[Cell] = []
    for main_cell, refill_cell in zip(board.iter_cells(), refill.iter_cells()):
        if main_cell.occupied:
            continue
        if refill_cell.color is None:
            raise ValueError(f"Refill board has no tile for hole at {main_cell.position}")
        main_cell.fill(refill_cell.color)
        filled.append(main_cell)
    return filled
