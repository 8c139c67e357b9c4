from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tileblast.components.tile_color import TileColor


@dataclass(slots=True, eq=False)
class Cell:
    """A single grid slot.

    Exactly one Cell exists per board position for the lifetime of a level.
    Tiles "move" by swapping ``occupied``/``color`` between slots; ``row`` and
    ``col`` are assigned once at creation.
    Invariant: ``occupied`` is False exactly when ``color`` is None.
    """
    row: int
    col: int
    occupied: bool = False
    color: Optional[TileColor] = None

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def fill(self, color: TileColor) -> None:
        self.occupied = True
        self.color = color

    def clear(self) -> None:
        self.occupied = False
        self.color = None

    def snapshot(self) -> CellSnapshot:
        return CellSnapshot(row=self.row, col=self.col, color=self.color)


@dataclass(frozen=True, slots=True)
class CellSnapshot:
    """Immutable copy of a cell's state taken when an event is recorded."""
    row: int
    col: int
    color: Optional[TileColor]

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    @property
    def occupied(self) -> bool:
        return self.color is not None
