# Level data seed value meaning "unseeded"; a fresh seed is drawn instead.
SEED_TO_IGNORE = 0

# Maximum reshuffles used to resolve a board with no legal move.
SHUFFLE_LIMIT = 10

# Smallest connected group a tap may collect.
MIN_MATCH_SIZE = 2

# Upper bound for freshly drawn effective seeds.
MAX_SEED = 2**31 - 1

# Random level generation ranges (inclusive).
MIN_COLOR_COUNT = 4
MAX_COLOR_COUNT = 6
MIN_GRID_LENGTH = 5
MAX_GRID_LENGTH = 9
MIN_MOVE_COUNT = 10
MAX_MOVE_COUNT = 50
MIN_GOAL_COUNT = 1
MAX_GOAL_COUNT = 4
MIN_GOAL_AMOUNT = 1
MAX_GOAL_AMOUNT = 20
