from __future__ import annotations

import random
from typing import List

from esper import World

from tileblast.components.board import Board
from tileblast.components.grid_tags import MainGrid, RefillGrid
from tileblast.components.level_config import LevelConfig
from tileblast.components.level_session import LevelSession
from tileblast.components.move_state import MoveState


def get_main_board(world: World) -> Board:
    for _, (_, board) in world.get_components(MainGrid, Board):
        return board
    raise RuntimeError("Main board not found; start a level first")


def get_refill_board(world: World) -> Board:
    for _, (_, board) in world.get_components(RefillGrid, Board):
        return board
    raise RuntimeError("Refill board not found; start a level first")


def get_level_session(world: World) -> LevelSession:
    for _, session in world.get_component(LevelSession):
        return session
    raise RuntimeError("LevelSession not found; start a level first")


def get_move_state(world: World) -> MoveState:
    for _, state in world.get_component(MoveState):
        return state
    raise RuntimeError("MoveState not found; start a level first")


def fill_starting_board(board: Board, config: LevelConfig, rng: random.Random) -> None:
    """Fill every cell of ``board`` for the start of a level.

    A fixed starting grid arrives top row first; it is remapped onto the
    bottom-row-first board with ``flat[(length - 1 - row) * length + col]``.
    Otherwise colors are drawn from the palette in row-major order.
    """
    length = board.length
    fixed = config.starting_grid
    for row in range(length):
        for col in range(length):
            if fixed is not None:
                color = fixed[(length - 1 - row) * length + col]
            else:
                color = rng.choice(config.palette)
            board.cells[row][col].fill(color)


def legal_tap_positions(board: Board) -> List[tuple[int, int]]:
    """Positions of every occupied cell that has a same-colored 4-neighbor."""
    positions: List[tuple[int, int]] = []
    for cell in board.iter_cells():
        if not cell.occupied:
            continue
        for row, col in board.neighbors4(cell.row, cell.col):
            neighbor = board.cells[row][col]
            if neighbor.occupied and neighbor.color is cell.color:
                positions.append((cell.row, cell.col))
                break
    return positions
