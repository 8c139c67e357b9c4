import random

import pytest

from tileblast.components.cell import CellSnapshot
from tileblast.components.goal import Goal, GoalType
from tileblast.components.level_config import GoalSpec
from tileblast.components.tile_color import TileColor
from tileblast.events.domain import GoalCompleted, GoalProgress
from tileblast.systems.goals import GoalTracker


def _group(color, size):
    return [CellSnapshot(row=0, col=index, color=color) for index in range(size)]


def _tracker(*specs):
    return GoalTracker.from_specs(GoalSpec(goal_type=goal_type, amount=amount) for goal_type, amount in specs)


def test_color_and_any_goals_progress_independently():
    tracker = _tracker((GoalType.COLLECT_RED, 5), (GoalType.COLLECT_ANY, 10))

    events = tracker.on_matched(_group(TileColor.RED, 3))
    assert events == [
        GoalProgress(goal_type=GoalType.COLLECT_RED, remaining=2),
        GoalProgress(goal_type=GoalType.COLLECT_ANY, remaining=7),
    ]

    events = tracker.on_matched(_group(TileColor.BLUE, 4))
    assert events == [GoalProgress(goal_type=GoalType.COLLECT_ANY, remaining=3)]
    assert tracker.remaining(GoalType.COLLECT_RED) == 2
    assert tracker.remaining(GoalType.COLLECT_ANY) == 3


def test_reaching_zero_completes_goal_once():
    tracker = _tracker((GoalType.COLLECT_GREEN, 4))
    assert tracker.on_matched(_group(TileColor.GREEN, 6)) == [
        GoalCompleted(goal_type=GoalType.COLLECT_GREEN)
    ]
    assert tracker.remaining(GoalType.COLLECT_GREEN) == 0
    assert tracker.all_complete()
    assert tracker.on_matched(_group(TileColor.GREEN, 2)) == []
    assert tracker.remaining(GoalType.COLLECT_GREEN) == 0


def test_unrelated_color_leaves_goals_alone():
    tracker = _tracker((GoalType.COLLECT_RED, 5))
    assert tracker.on_matched(_group(TileColor.YELLOW, 3)) == []
    assert tracker.remaining(GoalType.COLLECT_RED) == 5
    assert not tracker.all_complete()


def test_empty_collection_is_ignored():
    tracker = _tracker((GoalType.COLLECT_ANY, 5))
    assert tracker.on_matched([]) == []
    assert tracker.remaining(GoalType.COLLECT_ANY) == 5


def test_all_complete_needs_every_goal():
    tracker = _tracker((GoalType.COLLECT_RED, 2), (GoalType.COLLECT_ANY, 5))
    tracker.on_matched(_group(TileColor.RED, 2))
    assert not tracker.all_complete()
    tracker.on_matched(_group(TileColor.BLUE, 3))
    assert tracker.all_complete()


def test_remaining_is_monotonic_and_never_negative():
    rng = random.Random(99)
    tracker = _tracker(
        (GoalType.COLLECT_RED, 15),
        (GoalType.COLLECT_BLUE, 9),
        (GoalType.COLLECT_ORANGE, 20),
        (GoalType.COLLECT_ANY, 40),
    )
    colors = list(TileColor)
    previous = {goal_type: goal.remaining for goal_type, goal in tracker.goals.items()}
    for _ in range(60):
        tracker.on_matched(_group(rng.choice(colors), rng.randint(2, 8)))
        for goal_type, goal in tracker.goals.items():
            assert 0 <= goal.remaining <= previous[goal_type] <= goal.total
            previous[goal_type] = goal.remaining


def test_goal_rejects_negative_values():
    with pytest.raises(ValueError):
        Goal(type=GoalType.COLLECT_RED, total=-1)
    goal = Goal(type=GoalType.COLLECT_RED, total=3)
    with pytest.raises(ValueError):
        goal.consume(-2)


def test_goal_type_color_mapping():
    assert GoalType.for_color(TileColor.VIOLET) is GoalType.COLLECT_VIOLET
    assert GoalType.COLLECT_ORANGE.color is TileColor.ORANGE
    assert GoalType.COLLECT_ANY.color is None
