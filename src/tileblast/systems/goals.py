from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Union

from tileblast.components.cell import Cell, CellSnapshot
from tileblast.components.goal import Goal, GoalType
from tileblast.components.level_config import GoalSpec
from tileblast.events.domain import GoalCompleted, GoalProgress

logger = logging.getLogger(__name__)

GoalEvent = Union[GoalProgress, GoalCompleted]


class GoalTracker:
    """Applies collected groups to the level's goals.

    A group counts toward its color's collect goal and, independently, toward
    the collect-any goal. Complete goals are never touched again.
    """

    def __init__(self, goals: Dict[GoalType, Goal]) -> None:
        self.goals = goals

    @classmethod
    def from_specs(cls, specs: Iterable[GoalSpec]) -> GoalTracker:
        return cls({spec.goal_type: Goal(type=spec.goal_type, total=spec.amount) for spec in specs})

    def on_matched(self, collected: Sequence[Union[Cell, CellSnapshot]]) -> List[GoalEvent]:
        if not collected:
            return []
        color = collected[0].color
        amount = len(collected)
        events: List[GoalEvent] = []
        if color is not None:
            self._apply(GoalType.for_color(color), amount, events)
        self._apply(GoalType.COLLECT_ANY, amount, events)
        return events

    def all_complete(self) -> bool:
        return all(goal.is_complete for goal in self.goals.values())

    def remaining(self, goal_type: GoalType) -> int:
        return self.goals[goal_type].remaining

    def _apply(self, goal_type: GoalType, amount: int, events: List[GoalEvent]) -> None:
        goal = self.goals.get(goal_type)
        if goal is None or goal.is_complete:
            return
        remaining = goal.consume(amount)
        if remaining == 0:
            logger.info("Goal %s completed", goal_type.name)
            events.append(GoalCompleted(goal_type=goal_type))
        else:
            logger.debug("Goal %s progress: %d/%d remaining", goal_type.name, remaining, goal.total)
            events.append(GoalProgress(goal_type=goal_type, remaining=remaining))
