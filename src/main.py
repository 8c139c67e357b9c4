"""Entry point for headless Tileblast play.

Generates a random level, plays it with the random player and logs the outcome.
Run with: ``python src/main.py [seed]``
"""
import logging
import sys

from tileblast.ai.simulation import simulate_random_level


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    seed = int(argv[0]) if argv else 1
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    summary = simulate_random_level(seed)
    level = summary.level
    print(f"Level {level.name}: {level.grid_length}x{level.grid_length}, {level.color_count} colors")
    print(f"Outcome: {summary.phase.name} after {summary.moves_made} move(s)")
    for goal_name, remaining in summary.goals_remaining.items():
        print(f"  {goal_name}: {remaining} remaining")
    return 0


if __name__ == "__main__":
    sys.exit(main())
