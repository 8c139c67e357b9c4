"""Gravity resolution: per-column hole counts and downward compaction.

Cells never move; falling is a transfer of ``(occupied, color)`` from the
filler slot into the hole ``holes_below`` places beneath it.
"""
from __future__ import annotations

from typing import List, Sequence

from tileblast.components.board import Board
from tileblast.components.cell import Cell
from tileblast.errors import GravityInvariantError

HoleTable = List[List[int]]


def holes_below(board: Board) -> HoleTable:
    """Count the empty cells beneath every position, column by column.

    Row 0 is always zero because it cannot fall any further, whether or not
    it is itself empty.
    """
    length = board.length
    holes = [[0] * length for _ in range(length)]
    for row in range(1, length):
        below_cells = board.cells[row - 1]
        below_holes = holes[row - 1]
        current = holes[row]
        for col in range(length):
            current[col] = below_holes[col] + (0 if below_cells[col].occupied else 1)
    return holes


def collect_fillers(board: Board, holes: Sequence[Sequence[int]]) -> List[Cell]:
    """Occupied cells above row 0 that have at least one hole beneath them."""
    fillers: List[Cell] = []
    for row in range(1, board.length):
        for cell in board.cells[row]:
            if cell.occupied and holes[row][cell.col] > 0:
                fillers.append(cell)
    return fillers


def apply_fall(board: Board, fillers: Sequence[Cell], holes: Sequence[Sequence[int]]) -> None:
    """Drop every filler by its hole count.

    The full set of moves is checked before anything is written: each target
    must be in bounds and either empty now or vacated by another filler in
    this batch, and no two fillers may share a target. On a violation the
    board is left untouched and :class:`GravityInvariantError` is raised.
    """
    sources = {(cell.row, cell.col) for cell in fillers}
    targets = set()
    moves = []
    for cell in fillers:
        delta = holes[cell.row][cell.col]
        target_row = cell.row - delta
        target = (target_row, cell.col)
        if delta <= 0 or not board.in_bounds(target_row, cell.col) or target in targets:
            raise GravityInvariantError((cell.row, cell.col), target)
        destination = board.cells[target_row][cell.col]
        if destination.occupied and target not in sources:
            raise GravityInvariantError((cell.row, cell.col), target)
        if not cell.occupied:
            raise GravityInvariantError((cell.row, cell.col), target)
        targets.add(target)
        moves.append((cell, destination))

    # Lower fillers first so every destination is already vacated when written.
    moves.sort(key=lambda move: move[0].row)
    for source, destination in moves:
        destination.fill(source.color)
        source.clear()


def resolve_gravity(board: Board) -> tuple[HoleTable, List[Cell]]:
    """Compute holes and fillers, apply the fall, and return what was used."""
    holes = holes_below(board)
    fillers = collect_fillers(board, holes)
    apply_fall(board, fillers, holes)
    return holes, fillers
