"""Configuration constants shared by the board, evaluator and search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import ConfigurationError

EMPTY_MARKER: str = " "
MIN_BOARD_WIDTH: int = 3
MAX_BOARD_WIDTH: int = 9
DEFAULT_BOARD_WIDTH: int = 3
DEFAULT_MARKERS: Tuple[str, ...] = ("X", "O")

# Upper bound on leaf positions enumerated before the heuristic takes over.
ITERATION_CAP: int = 1_000_000

# Live winning lines through a cell -> heuristic score. Counts above the
# largest key use the largest key's score.
LIVE_LINE_SCORES: Dict[int, int] = {
    0: 0,
    1: 10,
    2: 100,
    3: 1000,
    4: 10000,
}


@dataclass(frozen=True)
class SearchConfig:
    iteration_cap: int = ITERATION_CAP

    def __post_init__(self) -> None:
        if not isinstance(self.iteration_cap, int) or isinstance(self.iteration_cap, bool):
            raise ConfigurationError(f"Iteration cap must be an integer, got {self.iteration_cap!r}")
        if self.iteration_cap < 1:
            raise ConfigurationError(f"Iteration cap must be at least 1, got {self.iteration_cap}")
