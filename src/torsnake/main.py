# main.py
import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, GRID_SIZE, SPEED_MS, CELL_SIZE, Config
from .draw import draw_game, draw_game_over
from .session import GameSession

KEYMAP = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around grid.")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for food placement")
    parser.add_argument("--tick-ms", type=int, default=SPEED_MS, help="milliseconds per move")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per grid cell")
    parser.add_argument(
        "--avoid-snake",
        action="store_true",
        help="never place food on the snake (a full grid then ends the game as a win)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        seed=args.seed,
        tick_ms=args.tick_ms,
        avoid_snake=args.avoid_snake,
        cell_size=args.cell_size,
    ).validate()


def handle_input(session: GameSession, now_ms: int) -> bool:
    """Forward key presses to the session. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_r:
                session.restart(now_ms)
            elif event.key in KEYMAP:
                session.request_direction(KEYMAP[event.key])
    return True


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    side = GRID_SIZE * config.cell_size
    screen = pygame.display.set_mode((side, side))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = GameSession(config)
    frame = {"state": session.state}
    session.subscribe(lambda state: frame.update(state=state))
    session.start(pygame.time.get_ticks())

    running = True
    while running:
        now = pygame.time.get_ticks()

        # 1) input, 2) update: strictly one after the other
        running = handle_input(session, now)
        if not running:
            break
        session.update(now)

        # 3) render
        state = frame["state"]
        draw_game(screen, font, state, config.cell_size)
        if state.game_over:
            draw_game_over(screen, font, state)
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by the tick handle

    pygame.quit()
    print(f"Final length: {session.state.length}")


if __name__ == "__main__":
    main()
