from __future__ import annotations


class GridMinimaxError(ValueError):
    """Base class for errors raised by the search engine and game loop."""


class PreconditionError(GridMinimaxError):
    """Raised when a caller hands over a board, player or move that cannot be used."""


class ConfigurationError(GridMinimaxError):
    """Raised for an iteration cap or board width outside the supported range."""
