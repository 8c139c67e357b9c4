from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from tileblast.components.cell import Cell, CellSnapshot
from tileblast.components.tile_color import TileColor

Position = Tuple[int, int]
CellState = Tuple[bool, Optional[TileColor]]

# up, right, down, left
NEIGHBOR_OFFSETS: Tuple[Position, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass(slots=True)
class Board:
    """Square grid of cells. Row 0 is the bottom row; gravity pulls toward it.

    Cells are created once here and never reallocated.
    """
    length: int
    cells: List[List[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"Board length must be positive, got {self.length}")
        self.cells = [[Cell(row, col) for col in range(self.length)] for row in range(self.length)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.length and 0 <= col < self.length

    def neighbors4(self, row: int, col: int) -> List[Position]:
        if not self.in_bounds(row, col):
            return []
        return [
            (row + dr, col + dc)
            for dr, dc in NEIGHBOR_OFFSETS
            if self.in_bounds(row + dr, col + dc)
        ]

    def cell_at(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def iter_cells(self) -> Iterator[Cell]:
        """Row-major iteration, bottom row first."""
        for row in self.cells:
            yield from row

    def empty_cells(self) -> List[Cell]:
        return [cell for cell in self.iter_cells() if not cell.occupied]

    def color_counts(self) -> Counter:
        return Counter(cell.color for cell in self.iter_cells() if cell.occupied)

    def snapshots(self) -> Tuple[CellSnapshot, ...]:
        return tuple(cell.snapshot() for cell in self.iter_cells())

    def capture_state(self) -> List[CellState]:
        return [(cell.occupied, cell.color) for cell in self.iter_cells()]

    def restore_state(self, state: List[CellState]) -> None:
        if len(state) != self.length * self.length:
            raise ValueError("Board state does not match board size")
        for cell, (occupied, color) in zip(self.iter_cells(), state):
            cell.occupied = occupied
            cell.color = color
