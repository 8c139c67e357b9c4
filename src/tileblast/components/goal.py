from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tileblast.components.tile_color import TileColor


class GoalType(Enum):
    """Goal kinds. Values are the single-letter ids used by level files."""
    COLLECT_RED = "R"
    COLLECT_GREEN = "G"
    COLLECT_BLUE = "B"
    COLLECT_YELLOW = "Y"
    COLLECT_ORANGE = "O"
    COLLECT_VIOLET = "V"
    COLLECT_ANY = "A"

    @classmethod
    def for_color(cls, color: TileColor) -> GoalType:
        return cls(color.value)

    @property
    def color(self) -> Optional[TileColor]:
        if self is GoalType.COLLECT_ANY:
            return None
        return TileColor(self.value)


@dataclass(slots=True)
class Goal:
    """Remaining-count tracker for a single goal.

    ``remaining`` only ever decreases and is floored at zero; once it reaches
    zero the goal is complete for good.
    """
    type: GoalType
    total: int
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError(f"Goal total must not be negative, got {self.total}")
        self.remaining = self.total

    @property
    def is_complete(self) -> bool:
        return self.remaining == 0

    def consume(self, amount: int) -> int:
        """Decrement by ``amount`` (floored at zero) and return the new remaining."""
        if amount < 0:
            raise ValueError("Goal progress amount must not be negative")
        self.remaining = max(0, self.remaining - amount)
        return self.remaining
