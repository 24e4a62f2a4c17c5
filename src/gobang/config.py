"""Configuration constants used across the Gobang project."""

BOARD_SIZE: int = 15
WIN_SEQUENCE_LENGTH: int = 5

BLACK_STONE: str = "●"
WHITE_STONE: str = "○"
EMPTY_CELL: str = "·"

# Candidate moves must lie within this Chebyshev distance of an existing stone.
SEARCH_RANGE: int = 2

# Search depth bounds, measured in plies.
EASY_DEPTH: int = 2
MEDIUM_DEPTH: int = 3
HARD_DEPTH: int = 4
MAX_SEARCH_DEPTH: int = 5

# Winning line highlight when a game ends.
FLASH_COUNT: int = 3
FLASH_INTERVAL_SEC: float = 0.3

VERSION: str = "0.1.2"
AUTHOR: str = "Qiang Guo"
EMAIL: str = "bigdragonsoft@gmail.com"
WEBSITE: str = "https://github.com/bigdragonsoft/gobang"
