from __future__ import annotations

import random
from typing import List, Optional, Tuple

from tileblast.components.move_state import TERMINAL_PHASES
from tileblast.systems.board_ops import legal_tap_positions
from tileblast.systems.move_orchestrator import MoveOrchestrator, MoveResult

Position = Tuple[int, int]


class RandomPlayer:
    """Plays a level headlessly by tapping a random legal position each turn."""

    def __init__(self, orchestrator: MoveOrchestrator, rng: Optional[random.Random] = None) -> None:
        self.orchestrator = orchestrator
        self.random = rng or random.Random()
        self.taps: List[Position] = []

    def choose_tap(self) -> Optional[Position]:
        candidates = legal_tap_positions(self.orchestrator.board)
        if not candidates:
            return None
        return self.random.choice(candidates)

    def play(self, max_moves: Optional[int] = None) -> List[MoveResult]:
        """Tap until the level ends or ``max_moves`` valid taps have been made."""
        results: List[MoveResult] = []
        while self.orchestrator.phase not in TERMINAL_PHASES:
            if max_moves is not None and len(results) >= max_moves:
                break
            tap = self.choose_tap()
            if tap is None:
                break
            self.taps.append(tap)
            results.append(self.orchestrator.submit_tap(*tap))
        return results
