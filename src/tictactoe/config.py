"""Configuration constants used across the tic-tac-toe project."""

BOARD_SIZE: int = 3
CELL_COUNT: int = BOARD_SIZE * BOARD_SIZE
EMPTY_CELL: str = "·"

# Terminal scores seen from the automated player's side. No depth discount.
WIN_SCORE: int = 10
LOSS_SCORE: int = -10
DRAW_SCORE: int = 0

# Probability that Medium falls back to a random move on a given turn.
MEDIUM_RANDOM_CHANCE: float = 0.5

# Pause before the automated player moves, in seconds.
AI_MOVE_DELAY: float = 0.5

ACTION_LOG_CAPACITY: int = 8
