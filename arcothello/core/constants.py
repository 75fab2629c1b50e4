# arcothello/core/constants.py

# --- Board Dimensions ---
# Non-square on purpose: 9 columns (A-I) by 7 rows (1-7)
DEFAULT_WIDTH = 9
DEFAULT_HEIGHT = 7
MIN_SIZE = 4

# --- Moves ---
# (column, row). Returned when the side to move has nothing to play.
PASS_MOVE = (-1, -1)

# The 8 compass directions as (d_col, d_row)
DIRECTIONS = [
    (1, 0), (-1, 0), (1, 1), (-1, -1),
    (-1, 1), (1, -1), (0, 1), (0, -1),
]

# --- Heuristic Weights ---
# Defaults only; the live values come from arcothello/config/engine.yaml
CORNER_BONUS = 50000
WALL_MALUS = 8
CORNER_GIVING_MALUS = 75
RISKY_TERRITORY_MALUS = 4
# Rounds after which the raw piece count stops weighing in
EARLY_ROUNDS = 15
# Credited to the side that leaves its opponent without a move
BLOCKING_OPPONENT = 0

# --- Search ---
DEFAULT_DEPTH = 5
INF = float("inf")

ENGINE_NAME = "ArcOthello AC"
