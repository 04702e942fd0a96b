# game.py
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple
import logging
import random

from .config import (
    GRID_SIZE, START, DIRECTIONS, INITIAL_DIRECTION,
    Config, CFG,
)
from .errors import GridFull, InvalidStateError

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]
Direction = Tuple[int, int]

_NAMES = {d: name for name, d in DIRECTIONS.items()}

# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def parse_direction(name: str) -> Direction:
    """Map 'up' / 'UP' / ' Up ' to a direction tuple."""
    try:
        return DIRECTIONS[str(name).strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown direction: {name!r}") from None

def direction_name(direction: Direction) -> str:
    return _NAMES[direction]

def next_head(head: Coord, direction: Direction) -> Coord:
    """One cell along direction; the moving axis wraps modulo GRID_SIZE."""
    hx, hy = head
    dx, dy = direction
    return ((hx + dx) % GRID_SIZE, (hy + dy) % GRID_SIZE)

def _as_direction(value) -> Optional[Direction]:
    """Normalize lists and tuples to a direction tuple; None if it is not one."""
    try:
        direction = tuple(value)
        return direction if direction in _NAMES else None
    except TypeError:
        return None

def _in_grid(cell: Coord) -> bool:
    return 0 <= cell[0] < GRID_SIZE and 0 <= cell[1] < GRID_SIZE

def generate_food(
    snake: Iterable[Coord] = (),
    rng: Optional[random.Random] = None,
    avoid: bool = False,
) -> Coord:
    """
    Pick a food cell uniformly over the grid.

    With avoid=False the snake is ignored and food may land on it. With
    avoid=True the pick is uniform over the free cells only, and GridFull
    is raised when the snake covers the whole grid.
    """
    rng = rng or random
    if not avoid:
        return (rng.randrange(GRID_SIZE), rng.randrange(GRID_SIZE))

    occupied = set(snake)
    free = [
        (x, y)
        for y in range(GRID_SIZE)
        for x in range(GRID_SIZE)
        if (x, y) not in occupied
    ]
    if not free:
        raise GridFull(f"snake covers all {GRID_SIZE * GRID_SIZE} cells")
    return rng.choice(free)

# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Coord, ...]       # head at index 0
    direction: Direction
    food: Optional[Coord]          # None only once the grid is full
    game_over: bool = False
    won: bool = False

    def __post_init__(self):
        snake = tuple(tuple(cell) for cell in self.snake)
        object.__setattr__(self, "snake", snake)
        if not snake:
            raise InvalidStateError("snake must have at least one segment")
        if len(set(snake)) != len(snake):
            raise InvalidStateError(f"snake has duplicate segments: {snake}")
        bad = [cell for cell in snake if not _in_grid(cell)]
        if bad:
            raise InvalidStateError(f"snake segments outside the grid: {bad}")
        if self.food is not None:
            object.__setattr__(self, "food", tuple(self.food))
            if not _in_grid(self.food):
                raise InvalidStateError(f"food outside the grid: {self.food}")
        direction = _as_direction(self.direction)
        if direction is None:
            raise InvalidStateError(f"not a direction: {self.direction!r}")
        object.__setattr__(self, "direction", direction)

    @property
    def head(self) -> Coord:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def to_dict(self) -> dict:
        """Full snapshot for render consumers."""
        return {
            "snake": [{"x": x, "y": y} for x, y in self.snake],
            "food": None if self.food is None else {"x": self.food[0], "y": self.food[1]},
            "direction": direction_name(self.direction),
            "game_over": self.game_over,
            "won": self.won,
        }

# ---------- Lifecycle ----------
def initialize(rng: Optional[random.Random] = None, config: Config = CFG) -> GameState:
    snake = (START,)
    return GameState(
        snake=snake,
        direction=INITIAL_DIRECTION,
        food=generate_food(snake, rng, avoid=config.avoid_snake),
        game_over=False,
    )

def restart(
    state: Optional[GameState] = None,
    rng: Optional[random.Random] = None,
    config: Config = CFG,
) -> GameState:
    """Throw away `state` and start over from the initial configuration."""
    return initialize(rng, config)

# ---------- Transitions ----------
def tick(state: GameState, rng: Optional[random.Random] = None, config: Config = CFG) -> GameState:
    """
    Advance the snake by one cell.

    - Game over: returns `state` unchanged.
    - New head on the body (tail included): game over, nothing else moves.
    - New head on food: grow by one and place new food.
    - Otherwise: move, length unchanged.
    """
    if state.game_over:
        return state

    new_head = next_head(state.head, state.direction)

    # Self collision
    if new_head in state.snake:
        return replace(state, game_over=True)

    # Move / grow
    if new_head == state.food:
        snake = (new_head,) + state.snake
        try:
            food = generate_food(snake, rng, avoid=config.avoid_snake)
        except GridFull:
            logger.info("Grid full at length %d", len(snake))
            return replace(state, snake=snake, food=None, game_over=True, won=True)
        return replace(state, snake=snake, food=food)

    snake = (new_head,) + state.snake[:-1]
    return replace(state, snake=snake)

def change_direction(state: GameState, direction: Direction) -> GameState:
    """Turn the snake; 180° reversals and turns after game over are ignored."""
    checked = _as_direction(direction)
    if checked is None:
        raise ValueError(f"Not a direction: {direction!r}")
    direction = checked
    if state.game_over or is_opposite(direction, state.direction):
        return state
    if direction == state.direction:
        return state
    return replace(state, direction=direction)
