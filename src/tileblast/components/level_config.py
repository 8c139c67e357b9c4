"""Decoded level configuration.

Level files name colors and goals with single letters (``"R"``, ``"A"`` ...).
They are decoded to :class:`TileColor` / :class:`GoalType` here, at the load
boundary, so the engine never handles the raw strings.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from tileblast.components.goal import GoalType
from tileblast.components.tile_color import TileColor
from tileblast.constants import SEED_TO_IGNORE
from tileblast.errors import LevelConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GoalSpec:
    goal_type: GoalType
    amount: int


@dataclass(frozen=True, slots=True)
class LevelConfig:
    grid_length: int
    palette: Tuple[TileColor, ...]
    goals: Tuple[GoalSpec, ...]
    starting_move_count: int
    starting_grid: Optional[Tuple[TileColor, ...]] = None
    seed: int = SEED_TO_IGNORE
    name: str = ""

    def __post_init__(self) -> None:
        if self.grid_length < 1:
            raise LevelConfigError(f"gridLength must be positive, got {self.grid_length}")
        if not self.palette:
            raise LevelConfigError("colorPalette must name at least one color")
        if len(set(self.palette)) != len(self.palette):
            raise LevelConfigError("colorPalette must not repeat colors")
        if self.starting_grid is not None:
            expected = self.grid_length * self.grid_length
            if len(self.starting_grid) != expected:
                raise LevelConfigError(
                    f"startingGrid has {len(self.starting_grid)} entries, expected {expected}"
                )
        for goal in self.goals:
            if goal.amount < 1:
                raise LevelConfigError(f"Goal {goal.goal_type.name} amount must be at least 1, got {goal.amount}")

    @property
    def color_count(self) -> int:
        return len(self.palette)

    @property
    def is_starting_grid_fixed(self) -> bool:
        return self.starting_grid is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LevelConfig:
        """Decode level data as laid out in level files (camelCase keys)."""
        try:
            grid_length = int(data["gridLength"])
            raw_palette: Sequence[str] = data["colorPalette"]
            move_count = int(data["startingMoveCount"])
        except KeyError as exc:
            raise LevelConfigError(f"Level data missing required key {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise LevelConfigError(f"Level data has malformed numeric field: {exc}") from exc

        color_count = int(data.get("colorCount") or len(raw_palette))
        if color_count > len(raw_palette):
            raise LevelConfigError(
                f"colorCount {color_count} exceeds the {len(raw_palette)} colors in colorPalette"
            )
        palette = tuple(decode_color(letter) for letter in raw_palette[:color_count])

        starting_grid = None
        raw_grid = data.get("startingGrid")
        fixed = data.get("isStartingGridFixed", raw_grid is not None)
        if fixed and raw_grid:
            starting_grid = tuple(decode_color(letter) for letter in raw_grid)
        elif fixed:
            logger.warning("Level %r marks its starting grid fixed but provides none", data.get("name", ""))

        goals: Dict[GoalType, GoalSpec] = {}
        for entry in data.get("goals") or []:
            goal_type = decode_goal_type(entry.get("goalType", ""))
            try:
                amount = int(entry["goalAmount"])
            except KeyError:
                raise LevelConfigError(f"Goal {goal_type.name} has no goalAmount") from None
            except (TypeError, ValueError) as exc:
                raise LevelConfigError(f"Goal {goal_type.name} has malformed goalAmount: {exc}") from exc
            if goal_type in goals:
                logger.warning("Duplicate goal %s in level data; keeping the last amount %d", goal_type.name, amount)
            goals[goal_type] = GoalSpec(goal_type=goal_type, amount=amount)

        return cls(
            grid_length=grid_length,
            palette=palette,
            goals=tuple(goals.values()),
            starting_move_count=move_count,
            starting_grid=starting_grid,
            seed=int(data.get("seed") or SEED_TO_IGNORE),
            name=str(data.get("name") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "seed": self.seed,
            "colorCount": self.color_count,
            "colorPalette": [color.letter for color in self.palette],
            "gridLength": self.grid_length,
            "isStartingGridFixed": self.is_starting_grid_fixed,
            "startingGrid": [color.letter for color in self.starting_grid] if self.starting_grid else [],
            "goals": [
                {"goalType": goal.goal_type.value, "goalAmount": goal.amount}
                for goal in self.goals
            ],
            "startingMoveCount": self.starting_move_count,
        }


def decode_color(letter: str) -> TileColor:
    try:
        return TileColor(letter)
    except ValueError:
        raise LevelConfigError(f"Unknown color id {letter!r}") from None


def decode_goal_type(letter: str) -> GoalType:
    try:
        return GoalType(letter)
    except ValueError:
        raise LevelConfigError(f"Unknown goal type id {letter!r}") from None
