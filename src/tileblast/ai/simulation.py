from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tileblast.ai.random_player import RandomPlayer
from tileblast.components.level_config import LevelConfig
from tileblast.components.move_state import MovePhase
from tileblast.events.bus import EventBus
from tileblast.factories.random_level import generate_random_level
from tileblast.systems.move_orchestrator import MoveOrchestrator
from tileblast.world import create_world


@dataclass(slots=True)
class SimulationSummary:
    level: LevelConfig
    seed: int
    phase: MovePhase
    moves_made: int
    goals_remaining: Dict[str, int] = field(default_factory=dict)
    taps: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def won(self) -> bool:
        return self.phase is MovePhase.LEVEL_WON


def simulate_level(
    config: LevelConfig,
    *,
    seed: Optional[int] = None,
    player_rng: Optional[random.Random] = None,
    max_moves: Optional[int] = None,
    event_bus: Optional[EventBus] = None,
) -> SimulationSummary:
    """Play ``config`` with a :class:`RandomPlayer` and summarise the outcome."""
    orchestrator = MoveOrchestrator(create_world(), event_bus)
    orchestrator.start_level(config, seed=seed)
    player = RandomPlayer(orchestrator, player_rng)
    player.play(max_moves=max_moves)
    session = orchestrator.session
    return SimulationSummary(
        level=config,
        seed=session.seed,
        phase=orchestrator.phase,
        moves_made=session.moves_made,
        goals_remaining={goal_type.name: goal.remaining for goal_type, goal in session.goals.items()},
        taps=list(player.taps),
    )


def simulate_random_level(seed: int, *, max_moves: Optional[int] = None) -> SimulationSummary:
    """Generate a random level from ``seed`` and play it with the same seed."""
    rng = random.Random(seed)
    config = generate_random_level(rng, name=f"random-{seed}")
    return simulate_level(config, seed=seed, player_rng=rng, max_moves=max_moves)
