"""Sequences one tap into a fully resolved board.

A valid tap runs match, removal, gravity, refill, the solvability guard,
goal accounting and the move budget in that order, and returns the domain
events produced along the way.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from esper import World

from tileblast.components.board import Board
from tileblast.components.level_config import LevelConfig
from tileblast.components.level_session import LevelSession
from tileblast.components.move_state import MovePhase, MoveState
from tileblast.constants import MAX_SEED, MIN_MATCH_SIZE, SEED_TO_IGNORE, SHUFFLE_LIMIT
from tileblast.errors import GravityInvariantError, UnsolvableBoardError
from tileblast.events.bus import EventBus
from tileblast.events.domain import (
    BoardReady,
    BoardShuffled,
    CellsCollected,
    CellsFellToFillHoles,
    CellsRemoved,
    DomainEvent,
    InvalidMove,
    LevelEnded,
    MoveResolved,
    RefillReady,
    freeze_holes,
    publish_events,
)
from tileblast.systems.board_ops import (
    fill_starting_board,
    get_level_session,
    get_main_board,
    get_move_state,
    get_refill_board,
)
from tileblast.systems.goals import GoalTracker
from tileblast.systems.gravity import apply_fall, collect_fillers, holes_below
from tileblast.systems.match import MatchEngine, sorted_cells
from tileblast.systems.refill import merge_refill_into_main, populate_refill
from tileblast.systems.solvability import ensure_solvable
from tileblast.utils.board_format import format_board
from tileblast.world import spawn_level

logger = logging.getLogger(__name__)

REASON_NOT_ACCEPTING = "not_accepting_input"
REASON_OUT_OF_BOUNDS = "out_of_bounds"
REASON_EMPTY_CELL = "empty_cell"
REASON_SINGLE_TILE = "single_tile"


@dataclass(frozen=True, slots=True)
class MoveResult:
    valid: bool
    events: Tuple[DomainEvent, ...]
    phase: MovePhase


class MoveOrchestrator:
    """Owns the board for the duration of a level and resolves taps on it."""

    def __init__(
        self,
        world: World,
        event_bus: Optional[EventBus] = None,
        *,
        max_shuffle_attempts: int = SHUFFLE_LIMIT,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.max_shuffle_attempts = max_shuffle_attempts
        self.match_engine = MatchEngine()
        self.config: Optional[LevelConfig] = None
        self.goal_tracker: Optional[GoalTracker] = None

    # Level lifecycle ----------------------------------------------------

    def start_level(self, config: LevelConfig, *, seed: Optional[int] = None) -> Tuple[DomainEvent, ...]:
        """Set up a fresh session for ``config`` and return the start-up events.

        ``seed`` overrides the configured seed. When neither is set a fresh
        effective seed is drawn and recorded on the session.
        """
        if seed is None or seed == SEED_TO_IGNORE:
            seed = config.seed
        if seed == SEED_TO_IGNORE:
            seed = random.SystemRandom().randint(1, MAX_SEED)

        session = spawn_level(self.world, config, seed)
        self.config = config
        self.goal_tracker = GoalTracker(session.goals)
        board = get_main_board(self.world)
        state = get_move_state(self.world)
        fill_starting_board(board, config, session.rng)
        logger.info(
            "Level %r started: %dx%d, %d colors, %d moves, seed %d",
            config.name, board.length, board.length, config.color_count, session.move_count, seed,
        )

        events: List[DomainEvent] = []
        try:
            shuffles = ensure_solvable(board, session.rng, self.max_shuffle_attempts)
        except UnsolvableBoardError:
            state.phase = MovePhase.BOARD_LOCKED
            raise
        if shuffles:
            events.append(BoardShuffled(cells=board.snapshots(), attempts=shuffles))
        events.append(BoardReady(cells=board.snapshots()))
        logger.debug("Starting board:\n%s", format_board(board))
        state.phase = MovePhase.AWAITING_INPUT
        return self._finish(events)

    def restart(self, *, reuse_seed: bool = True) -> Tuple[DomainEvent, ...]:
        """Discard the current session and start the same level again.

        With ``reuse_seed`` the previous effective seed is replayed, giving the
        same starting board and the same refills for the same taps.
        """
        if self.config is None:
            raise RuntimeError("No level to restart; call start_level first")
        seed = get_level_session(self.world).seed if reuse_seed else None
        logger.info("Restarting level %r (reuse_seed=%s)", self.config.name, reuse_seed)
        return self.start_level(self.config, seed=seed)

    # Queries -------------------------------------------------------------

    @property
    def board(self) -> Board:
        return get_main_board(self.world)

    @property
    def session(self) -> LevelSession:
        return get_level_session(self.world)

    @property
    def phase(self) -> MovePhase:
        return get_move_state(self.world).phase

    def is_valid_move(self, row: int, col: int) -> bool:
        return self.match_engine.is_valid_move(self.board, row, col)

    # Moves ---------------------------------------------------------------

    def submit_tap(self, row: int, col: int) -> MoveResult:
        state = get_move_state(self.world)
        if not state.accepts_input:
            return self._reject(state, row, col, REASON_NOT_ACCEPTING)
        board = get_main_board(self.world)
        if not board.in_bounds(row, col):
            return self._reject(state, row, col, REASON_OUT_OF_BOUNDS)
        tapped = board.cells[row][col]
        if not tapped.occupied:
            return self._reject(state, row, col, REASON_EMPTY_CELL)
        group = self.match_engine.collect_same_color(board, tapped)
        if len(group) < MIN_MATCH_SIZE:
            return self._reject(state, row, col, REASON_SINGLE_TILE)

        state.phase = MovePhase.RESOLVING
        session = get_level_session(self.world)
        collected = tuple(cell.snapshot() for cell in sorted_cells(group))
        events: List[DomainEvent] = [CellsCollected(cells=collected)]

        before = board.capture_state()
        try:
            events.extend(self._clear_and_refill(board, group, collected, session))
        except GravityInvariantError:
            board.restore_state(before)
            state.phase = MovePhase.AWAITING_INPUT
            logger.exception("Gravity invariant violated; board restored")
            raise

        try:
            shuffles = ensure_solvable(board, session.rng, self.max_shuffle_attempts)
        except UnsolvableBoardError:
            state.phase = MovePhase.BOARD_LOCKED
            self._publish(events)
            raise
        if shuffles:
            events.append(BoardShuffled(cells=board.snapshots(), attempts=shuffles))

        events.extend(self.goal_tracker.on_matched(collected))
        moves_left = session.consume_move()
        events.append(MoveResolved(moves_left=moves_left))
        events.extend(self._check_level_end(state, session))
        return MoveResult(valid=True, events=self._finish(events), phase=state.phase)

    def _clear_and_refill(self, board, group, collected, session) -> List[DomainEvent]:
        events: List[DomainEvent] = []
        for cell in group:
            cell.clear()
        events.append(CellsRemoved(cells=collected))

        holes = holes_below(board)
        fillers = collect_fillers(board, holes)
        events.append(CellsFellToFillHoles(
            cells=tuple(cell.snapshot() for cell in fillers),
            hole_counts=freeze_holes(holes),
        ))
        apply_fall(board, fillers, holes)

        refill = populate_refill(board, self.config.palette, session.rng, get_refill_board(self.world))
        events.append(RefillReady(
            refill_cells=refill.snapshots(),
            hole_counts=freeze_holes(holes_below(refill)),
        ))
        merge_refill_into_main(board, refill)
        return events

    def _check_level_end(self, state: MoveState, session: LevelSession) -> List[DomainEvent]:
        if self.goal_tracker.all_complete():
            state.phase = MovePhase.LEVEL_WON
            logger.info("Level ended: won with %d move(s) left", session.move_count)
            return [LevelEnded(won=True)]
        if session.move_count == 0:
            state.phase = MovePhase.LEVEL_LOST
            logger.info("Level ended: out of moves")
            return [LevelEnded(won=False)]
        state.phase = MovePhase.AWAITING_INPUT
        return []

    def _reject(self, state: MoveState, row: int, col: int, reason: str) -> MoveResult:
        logger.debug("Invalid move at (%d, %d): %s", row, col, reason)
        events = self._finish([InvalidMove(row=row, col=col, reason=reason)])
        return MoveResult(valid=False, events=events, phase=state.phase)

    def _finish(self, events: List[DomainEvent]) -> Tuple[DomainEvent, ...]:
        frozen = tuple(events)
        self._publish(frozen)
        return frozen

    def _publish(self, events) -> None:
        if self.event_bus is not None:
            publish_events(self.event_bus, events)
