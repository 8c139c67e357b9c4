"""Random level generation within the standard shipped-level ranges."""
from __future__ import annotations

import random
from typing import List, Optional

from tileblast.components.goal import GoalType
from tileblast.components.level_config import GoalSpec, LevelConfig
from tileblast.components.tile_color import TileColor
from tileblast.constants import (
    MAX_COLOR_COUNT,
    MAX_GOAL_AMOUNT,
    MAX_GOAL_COUNT,
    MAX_GRID_LENGTH,
    MAX_MOVE_COUNT,
    MIN_COLOR_COUNT,
    MIN_GOAL_AMOUNT,
    MIN_GOAL_COUNT,
    MIN_GRID_LENGTH,
    MIN_MOVE_COUNT,
    SEED_TO_IGNORE,
)


def possible_goal_types(palette: List[TileColor]) -> List[GoalType]:
    """Collect goals for every palette color, then the collect-any goal."""
    return [GoalType.for_color(color) for color in palette] + [GoalType.COLLECT_ANY]


def generate_random_level(rng: Optional[random.Random] = None, *, name: str = "random") -> LevelConfig:
    """Create a random level: palette, grid size, move budget and 1-4 distinct goals.

    The starting grid is left random (not fixed) and the level is unseeded.
    """
    rng = rng or random.Random()
    color_count = rng.randint(MIN_COLOR_COUNT, MAX_COLOR_COUNT)
    grid_length = rng.randint(MIN_GRID_LENGTH, MAX_GRID_LENGTH)
    move_count = rng.randint(MIN_MOVE_COUNT, MAX_MOVE_COUNT)
    palette = list(TileColor)[:color_count]

    candidates = possible_goal_types(palette)
    goal_count = rng.randint(MIN_GOAL_COUNT, MAX_GOAL_COUNT)
    goals: List[GoalSpec] = []
    for _ in range(goal_count):
        goal_type = candidates.pop(rng.randrange(len(candidates)))
        goals.append(GoalSpec(goal_type=goal_type, amount=rng.randint(MIN_GOAL_AMOUNT, MAX_GOAL_AMOUNT)))

    return LevelConfig(
        grid_length=grid_length,
        palette=tuple(palette),
        goals=tuple(goals),
        starting_move_count=move_count,
        seed=SEED_TO_IGNORE,
        name=name,
    )
