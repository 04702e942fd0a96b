# render.py
# Read-only projections of a GameState, built fresh on every call.
import numpy as np  # type: ignore

from .config import GRID_SIZE
from .game import GameState

CELL_EMPTY = 0
CELL_SNAKE = 1
CELL_FOOD = 2
CELL_HEAD = 3

_GLYPHS = {CELL_EMPTY: ".", CELL_SNAKE: "o", CELL_FOOD: "*", CELL_HEAD: "H"}


def render(state: GameState) -> np.ndarray:
    """
    Return a (GRID_SIZE, GRID_SIZE) uint8 grid indexed [y, x].

    Snake cells win over food: food hidden under the body is not shown.
    """
    grid = np.full((GRID_SIZE, GRID_SIZE), CELL_EMPTY, dtype=np.uint8)
    if state.food is not None:
        fx, fy = state.food
        grid[fy, fx] = CELL_FOOD
    for x, y in state.snake[1:]:
        grid[y, x] = CELL_SNAKE
    hx, hy = state.head
    grid[hy, hx] = CELL_HEAD
    return grid


def render_text(state: GameState) -> str:
    """ASCII board, one row per line, top row first."""
    grid = render(state)
    rows = ["".join(_GLYPHS[int(c)] for c in row) for row in grid]
    return "\n".join(rows) + "\n"
