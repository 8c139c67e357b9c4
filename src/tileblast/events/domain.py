"""Domain event records produced while a level is played.

The orchestrator returns these as an ordered tuple from each call. Presentation
layers may instead subscribe on an :class:`EventBus`; ``publish_events``
replays a batch onto the bus in the same order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from tileblast.components.cell import CellSnapshot
from tileblast.components.goal import GoalType
from tileblast.events.bus import (
    EVENT_BOARD_READY,
    EVENT_BOARD_SHUFFLED,
    EVENT_CELLS_COLLECTED,
    EVENT_CELLS_FELL,
    EVENT_CELLS_REMOVED,
    EVENT_GOAL_COMPLETED,
    EVENT_GOAL_PROGRESS,
    EVENT_INVALID_MOVE,
    EVENT_LEVEL_ENDED,
    EVENT_MOVE_RESOLVED,
    EVENT_REFILL_READY,
    EventBus,
)

HoleCounts = Tuple[Tuple[int, ...], ...]
Cells = Tuple[CellSnapshot, ...]


@dataclass(frozen=True, slots=True)
class BoardReady:
    cells: Cells
    bus_name = EVENT_BOARD_READY


@dataclass(frozen=True, slots=True)
class InvalidMove:
    row: int
    col: int
    reason: str
    bus_name = EVENT_INVALID_MOVE


@dataclass(frozen=True, slots=True)
class CellsCollected:
    cells: Cells
    bus_name = EVENT_CELLS_COLLECTED


@dataclass(frozen=True, slots=True)
class CellsRemoved:
    cells: Cells
    bus_name = EVENT_CELLS_REMOVED


@dataclass(frozen=True, slots=True)
class CellsFellToFillHoles:
    """Cells (as they stood before falling) and the main-board hole counts."""
    cells: Cells
    hole_counts: HoleCounts
    bus_name = EVENT_CELLS_FELL


@dataclass(frozen=True, slots=True)
class RefillReady:
    """Full refill board state and its own hole counts for staging new tiles."""
    refill_cells: Cells
    hole_counts: HoleCounts
    bus_name = EVENT_REFILL_READY


@dataclass(frozen=True, slots=True)
class BoardShuffled:
    cells: Cells
    attempts: int
    bus_name = EVENT_BOARD_SHUFFLED


@dataclass(frozen=True, slots=True)
class GoalProgress:
    goal_type: GoalType
    remaining: int
    bus_name = EVENT_GOAL_PROGRESS


@dataclass(frozen=True, slots=True)
class GoalCompleted:
    goal_type: GoalType
    bus_name = EVENT_GOAL_COMPLETED


@dataclass(frozen=True, slots=True)
class MoveResolved:
    moves_left: int
    bus_name = EVENT_MOVE_RESOLVED


@dataclass(frozen=True, slots=True)
class LevelEnded:
    won: bool
    bus_name = EVENT_LEVEL_ENDED


DomainEvent = Union[
    BoardReady,
    InvalidMove,
    CellsCollected,
    CellsRemoved,
    CellsFellToFillHoles,
    RefillReady,
    BoardShuffled,
    GoalProgress,
    GoalCompleted,
    MoveResolved,
    LevelEnded,
]


def freeze_holes(holes: Iterable[Iterable[int]]) -> HoleCounts:
    return tuple(tuple(row) for row in holes)


def publish_events(bus: EventBus, events: Iterable[DomainEvent]) -> None:
    for event in events:
        bus.emit(event.bus_name, event=event)
