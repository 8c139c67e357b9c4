from __future__ import annotations

from collections import deque
from typing import List, Set

from tileblast.components.board import Board
from tileblast.components.cell import Cell
from tileblast.constants import MIN_MATCH_SIZE


class MatchEngine:
    """Flood-fill discovery of same-colored connected groups.

    Keeps one visited bitmap sized to the board and clears it per call, so
    repeated taps on the same board allocate nothing new.
    """

    def __init__(self) -> None:
        self._visited: List[List[bool]] = []

    def collect_same_color(self, board: Board, start: Cell) -> Set[Cell]:
        """Return the maximal 4-connected group of occupied cells sharing ``start``'s color.

        An unoccupied start yields an empty set.
        """
        if not start.occupied or start.color is None:
            return set()
        visited = self._reset_visited(board.length)
        color = start.color
        group: Set[Cell] = set()
        queue = deque([start])
        visited[start.row][start.col] = True
        while queue:
            current = queue.popleft()
            group.add(current)
            for row, col in board.neighbors4(current.row, current.col):
                if visited[row][col]:
                    continue
                neighbor = board.cells[row][col]
                if neighbor.occupied and neighbor.color is color:
                    visited[row][col] = True
                    queue.append(neighbor)
        return group

    def is_valid_move(self, board: Board, row: int, col: int) -> bool:
        if not board.in_bounds(row, col):
            return False
        return len(self.collect_same_color(board, board.cells[row][col])) >= MIN_MATCH_SIZE

    def _reset_visited(self, length: int) -> List[List[bool]]:
        if len(self._visited) != length:
            self._visited = [[False] * length for _ in range(length)]
        else:
            for row in self._visited:
                for col in range(length):
                    row[col] = False
        return self._visited


def collect_same_color(board: Board, start: Cell) -> Set[Cell]:
    return MatchEngine().collect_same_color(board, start)


def sorted_cells(cells) -> List[Cell]:
    """Row-major ordering (bottom row first) used for event payloads."""
    return sorted(cells, key=lambda cell: (cell.row, cell.col))
