from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict

from tileblast.components.goal import Goal, GoalType


@dataclass(slots=True)
class LevelSession:
    """Per-level mutable state: move budget, goal map and the level's RNG.

    ``seed`` is the effective seed the RNG was created with, so a restart can
    replay the level exactly.
    """
    move_count: int
    seed: int
    rng: random.Random = field(repr=False)
    goals: Dict[GoalType, Goal] = field(default_factory=dict)
    moves_made: int = 0

    def consume_move(self) -> int:
        if self.move_count > 0:
            self.move_count -= 1
        self.moves_made += 1
        return self.move_count
