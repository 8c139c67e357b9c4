"""Move state resource describing where the orchestrator is in its cycle."""
from dataclasses import dataclass
from enum import Enum, auto


class MovePhase(Enum):
    """Orchestrator phases. Input is only accepted while awaiting input."""
    AWAITING_INPUT = auto()
    RESOLVING = auto()
    LEVEL_WON = auto()
    LEVEL_LOST = auto()
    BOARD_LOCKED = auto()


TERMINAL_PHASES = frozenset({MovePhase.LEVEL_WON, MovePhase.LEVEL_LOST, MovePhase.BOARD_LOCKED})


@dataclass(slots=True)
class MoveState:
    """Singleton component storing the current orchestrator phase."""
    phase: MovePhase = MovePhase.AWAITING_INPUT

    @property
    def accepts_input(self) -> bool:
        return self.phase is MovePhase.AWAITING_INPUT
