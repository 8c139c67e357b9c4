import random

from esper import World

from tileblast.components.board import Board
from tileblast.components.goal import Goal
from tileblast.components.grid_tags import MainGrid, RefillGrid
from tileblast.components.level_config import LevelConfig
from tileblast.components.level_session import LevelSession
from tileblast.components.move_state import MoveState


def create_world() -> World:
    return World()


def spawn_level(world: World, config: LevelConfig, seed: int) -> LevelSession:
    """Populate ``world`` with the entities for one play of ``config``.

    The new components are built before the previous level's entities are
    discarded, so a failure here leaves that level in place. The main and
    refill boards are created empty; level setup fills the main board.
    """
    session = LevelSession(
        move_count=config.starting_move_count,
        seed=seed,
        rng=random.Random(seed),
        goals={spec.goal_type: Goal(type=spec.goal_type, total=spec.amount) for spec in config.goals},
    )
    main_board = Board(length=config.grid_length)
    refill_board = Board(length=config.grid_length)

    world.clear_database()
    world.create_entity(MainGrid(), main_board)
    world.create_entity(RefillGrid(), refill_board)
    world.create_entity(session, MoveState())
    return session
