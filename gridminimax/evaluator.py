from __future__ import annotations

from typing import AbstractSet, Dict

from .board import Board
from .config import LIVE_LINE_SCORES


class Evaluator:
    """Static evaluation for positions the search does not expand further.

    For every empty cell, count the winning lines through it that hold no
    marker of another player (live lines for the mover). The best cell's
    count is mapped to a score through ``LIVE_LINE_SCORES``; the result is
    negated when the mover is not the maximizing player.
    """

    SCORES: Dict[int, int] = LIVE_LINE_SCORES

    @classmethod
    def evaluate(
        cls,
        board: Board,
        other_markers: AbstractSet[str],
        maximizing: bool,
    ) -> int:
        best = 0
        for position in board.unmarked_positions():
            best = max(best, cls.score_for_live_lines(cls.live_lines_through(board, position, other_markers)))
        return best if maximizing else -best

    @staticmethod
    def live_lines_through(board: Board, position: int, other_markers: AbstractSet[str]) -> int:
        count = 0
        for line in board.lines_through(position):
            if any(marker in other_markers for marker in board.markers_in(line)):
                continue
            count += 1
        return count

    @classmethod
    def score_for_live_lines(cls, count: int) -> int:
        top = max(cls.SCORES)
        return cls.SCORES[min(count, top)]
