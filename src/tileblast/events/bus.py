from blinker import Signal
from typing import Dict


class EventBus:
    """Named blinker signals that domain events are replayed onto."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def _signal(self, name: str) -> Signal:
        return self._signals.setdefault(name, Signal(name))

    def subscribe(self, name: str, fn):
        # Held strongly: lambda listeners and throwaway view adapters stay connected.
        self._signal(name).connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        if name in self._signals:
            self._signals[name].disconnect(fn)

    def emit(self, name: str, **payload):
        """Send ``payload`` to every listener of ``name``; unknown names are a no-op."""
        if name in self._signals:
            self._signals[name].send(self, **payload)


# ============================================================================
# LEVEL LIFECYCLE
# ============================================================================
EVENT_BOARD_READY = "board_ready"                  # payload: event=BoardReady
EVENT_LEVEL_ENDED = "level_ended"                  # payload: event=LevelEnded


# ============================================================================
# INPUT
# ============================================================================
EVENT_INVALID_MOVE = "invalid_move"                # payload: event=InvalidMove


# ============================================================================
# BOARD RESOLUTION
# ============================================================================
EVENT_CELLS_COLLECTED = "cells_collected"          # payload: event=CellsCollected
EVENT_CELLS_REMOVED = "cells_removed"              # payload: event=CellsRemoved
EVENT_CELLS_FELL = "cells_fell_to_fill_holes"      # payload: event=CellsFellToFillHoles
EVENT_REFILL_READY = "refill_ready"                # payload: event=RefillReady
EVENT_BOARD_SHUFFLED = "board_shuffled"            # payload: event=BoardShuffled
EVENT_MOVE_RESOLVED = "move_resolved"              # payload: event=MoveResolved


# ============================================================================
# GOALS
# ============================================================================
EVENT_GOAL_PROGRESS = "goal_progress"              # payload: event=GoalProgress
EVENT_GOAL_COMPLETED = "goal_completed"            # payload: event=GoalCompleted
