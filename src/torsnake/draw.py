# draw.py
from typing import Tuple

import pygame  # type: ignore

from .config import BG, EMPTY, GREEN, HEAD, RED, TEXT, CELL_SIZE
from .game import GameState
from .render import render, CELL_SNAKE, CELL_FOOD, CELL_HEAD

_COLORS = {CELL_SNAKE: GREEN, CELL_FOOD: RED, CELL_HEAD: HEAD}


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int],
              cell_size: int = CELL_SIZE) -> None:
    # 1px gap so the grid reads as cells
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size - 1, cell_size - 1)
    pygame.draw.rect(screen, color, rect)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState,
              cell_size: int = CELL_SIZE) -> None:
    screen.fill(BG)
    grid = render(state)
    height, width = grid.shape
    for gy in range(height):
        for gx in range(width):
            color = _COLORS.get(int(grid[gy, gx]), EMPTY)
            draw_cell(screen, gx, gy, color, cell_size)
    txt = font.render(f"Length: {state.length}", True, TEXT)
    screen.blit(txt, (8, 6))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    width, height = screen.get_size()

    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("YOU WIN" if state.won else "GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press R to restart", True, TEXT)
    size  = font.render(f"Length: {state.length}", True, TEXT)

    screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
    screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 16)))
    screen.blit(size, size.get_rect(center=(width // 2, height // 2 + 44)))
