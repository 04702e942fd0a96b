# timer.py
from dataclasses import dataclass
from typing import Callable


@dataclass
class TickHandle:
    """
    A repeating tick driven by the host loop.

    The host calls poll(now_ms) from its single loop; on_tick runs at most
    once per poll, so a tick never overlaps an input handler or another
    tick. Once cancelled the handle never fires again.
    """
    interval_ms: int
    on_tick: Callable[[], None]
    last_fire: int                 # ms timestamp of last tick (or start)
    active: bool = True

    def poll(self, now_ms: int) -> bool:
        """Run on_tick if an interval has elapsed. Returns True if it ran."""
        if not self.active or now_ms - self.last_fire < self.interval_ms:
            return False
        self.last_fire = now_ms
        self.on_tick()
        return True

    def cancel(self) -> None:
        self.active = False


def start_ticking(interval_ms: int, on_tick: Callable[[], None], now_ms: int = 0) -> TickHandle:
    """Start a tick every interval_ms, counted from now_ms."""
    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be positive, got {interval_ms}")
    return TickHandle(interval_ms=interval_ms, on_tick=on_tick, last_fire=now_ms)
