"""Snake on a toroidal grid: pure game-state engine plus a pygame host."""

from .errors import SnakeError, GridFull, InvalidStateError, ConfigError
from .game import (
    GameState, initialize, restart, tick, change_direction,
    generate_food, next_head, is_opposite, parse_direction,
)
from .render import render, render_text
from .timer import TickHandle, start_ticking
from .session import GameSession

__all__ = [
    "SnakeError", "GridFull", "InvalidStateError", "ConfigError",
    "GameState", "initialize", "restart", "tick", "change_direction",
    "generate_food", "next_head", "is_opposite", "parse_direction",
    "render", "render_text",
    "TickHandle", "start_ticking",
    "GameSession",
]
