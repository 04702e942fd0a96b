# session.py
from typing import Callable, List, Optional
import logging
import random

from .config import Config, CFG
from .game import (
    Direction, GameState,
    initialize, restart, tick, change_direction,
)
from .timer import TickHandle, start_ticking

logger = logging.getLogger(__name__)

Subscriber = Callable[[GameState], None]


class GameSession:
    """
    Owns the one current GameState and the tick timer driving it.

    Every transition replaces `state` wholesale and hands the new snapshot
    to each subscriber. All calls are expected from one thread (the host
    loop), which makes each of them atomic with respect to the others.
    """

    def __init__(self, config: Config = CFG):
        self.config = config.validate()
        self.rng = random.Random(config.seed)
        self.state: GameState = initialize(self.rng, self.config)
        self.handle: Optional[TickHandle] = None
        self._subscribers: List[Subscriber] = []

    # ----- render sink -----
    def subscribe(self, callback: Subscriber) -> None:
        """Register a render consumer; it immediately gets the current state."""
        self._subscribers.append(callback)
        callback(self.state)

    def _publish(self, state: GameState) -> None:
        self.state = state
        for callback in self._subscribers:
            callback(state)

    # ----- timer -----
    @property
    def running(self) -> bool:
        return self.handle is not None and self.handle.active

    def start(self, now_ms: int = 0) -> TickHandle:
        """(Re)start the tick timer; any previous timer is cancelled first."""
        self.stop()
        self.handle = start_ticking(self.config.tick_ms, self.step, now_ms)
        return self.handle

    def stop(self) -> None:
        if self.handle is not None:
            self.handle.cancel()
            self.handle = None

    def update(self, now_ms: int) -> bool:
        """Poll the timer from the host loop. Returns True if a tick ran."""
        if self.handle is None:
            return False
        return self.handle.poll(now_ms)

    # ----- transitions -----
    def step(self) -> GameState:
        """Apply one tick immediately."""
        if self.state.game_over:
            return self.state
        new_state = tick(self.state, self.rng, self.config)
        if new_state.length > self.state.length:
            logger.debug("Ate food at %s, length %d", new_state.head, new_state.length)
        self._publish(new_state)
        if new_state.game_over:
            logger.info(
                "Game over (%s) at length %d",
                "grid full" if new_state.won else "self collision",
                new_state.length,
            )
            self.stop()
        return new_state

    def request_direction(self, direction: Direction) -> GameState:
        # turning does not reset the tick phase
        new_state = change_direction(self.state, direction)
        if new_state is self.state:
            logger.debug("Ignored direction %s", direction)
            return self.state
        self._publish(new_state)
        return new_state

    def restart(self, now_ms: int = 0) -> GameState:
        """Reset to the initial state and start a fresh timer."""
        logger.info("Restarting game")
        self.stop()
        self._publish(restart(self.state, self.rng, self.config))
        self.start(now_ms)
        return self.state
