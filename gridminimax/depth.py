from __future__ import annotations

from .config import ITERATION_CAP, SearchConfig
from .errors import ConfigurationError


def depth_budget(empty_squares: int, iteration_cap: int = ITERATION_CAP) -> int:
    """Number of plies that can be searched exhaustively under ``iteration_cap``.

    Multiplies the shrinking branch counts (n, n-1, n-2, ...) starting from
    the number of empty squares and stops before the running product exceeds
    the cap or when no empty squares remain. A board with few empty cells can
    therefore be searched to the end without the heuristic.
    """
    SearchConfig(iteration_cap=iteration_cap)
    if not isinstance(empty_squares, int) or empty_squares < 0:
        raise ConfigurationError(f"Empty square count must be a non-negative integer, got {empty_squares!r}")

    depth = 0
    product = 1
    remaining = empty_squares
    while remaining > 0:
        product *= remaining
        if product > iteration_cap:
            break
        depth += 1
        remaining -= 1
    return depth


def depth_budget_for_width(width: int, iteration_cap: int = ITERATION_CAP) -> int:
    """Depth budget for an empty ``width`` x ``width`` board."""
    return depth_budget(width * width, iteration_cap)
