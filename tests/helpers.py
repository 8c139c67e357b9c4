from __future__ import annotations

from typing import Sequence, Tuple

from tileblast.components.level_config import LevelConfig
from tileblast.events.bus import EventBus
from tileblast.systems.move_orchestrator import MoveOrchestrator
from tileblast.world import create_world


def make_config(
    rows: Sequence[str] | None = None,
    *,
    goals: Sequence[Tuple[str, int]] = (("R", 5),),
    moves: int = 10,
    palette: str = "RGBY",
    seed: int = 1234,
    length: int | None = None,
    name: str = "test",
) -> LevelConfig:
    """Build a LevelConfig the way a level file would describe it.

    ``rows`` are letter strings given top row first; omit them for a random
    starting grid of ``length``.
    """
    data = {
        "name": name,
        "seed": seed,
        "colorCount": len(palette),
        "colorPalette": list(palette),
        "goals": [{"goalType": goal_type, "goalAmount": amount} for goal_type, amount in goals],
        "startingMoveCount": moves,
    }
    if rows is not None:
        data["gridLength"] = len(rows)
        data["isStartingGridFixed"] = True
        data["startingGrid"] = [letter for row in rows for letter in row]
    else:
        data["gridLength"] = length or 6
        data["isStartingGridFixed"] = False
    return LevelConfig.from_dict(data)


def start_level(config: LevelConfig, **kwargs) -> tuple[MoveOrchestrator, EventBus]:
    """Create a world, bus and orchestrator and start ``config`` on them."""
    bus = EventBus()
    orchestrator = MoveOrchestrator(create_world(), bus, **kwargs)
    orchestrator.start_level(config)
    return orchestrator, bus


def positions(cells) -> set[tuple[int, int]]:
    return {(cell.row, cell.col) for cell in cells}
