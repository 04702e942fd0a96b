from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

# ----- Grid (toroidal, fixed) -----
GRID_SIZE = 20
START = (10, 10)

# ----- Window -----
CELL_SIZE = 20
WIDTH, HEIGHT = GRID_SIZE * CELL_SIZE, GRID_SIZE * CELL_SIZE

# ----- Colors -----
BG    = (15, 23, 42)
EMPTY = (31, 41, 55)
GREEN = (34, 197, 94)
HEAD  = (74, 222, 128)
RED   = (239, 68, 68)
TEXT  = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = {"UP": UP, "DOWN": DOWN, "LEFT": LEFT, "RIGHT": RIGHT}
INITIAL_DIRECTION = RIGHT

# ----- Timing -----
SPEED_MS = 200


@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = SPEED_MS
    avoid_snake: bool = False   # food never lands on the snake; enables GridFull
    cell_size: int = CELL_SIZE

    def validate(self) -> "Config":
        if self.tick_ms <= 0:
            raise ConfigError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.cell_size <= 0:
            raise ConfigError(f"cell_size must be positive, got {self.cell_size}")
        return self


CFG = Config()
