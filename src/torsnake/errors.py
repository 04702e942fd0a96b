# errors.py


class SnakeError(Exception):
    """Base class for engine errors."""


class GridFull(SnakeError):
    """No free cell is left to place food on."""


class InvalidStateError(SnakeError, ValueError):
    """A GameState was built with a malformed snake or food."""


class ConfigError(SnakeError, ValueError):
    """A Config holds values the engine cannot run with."""
