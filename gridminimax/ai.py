from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

import logging
import math

from .board import Board
from .config import ITERATION_CAP, SearchConfig
from .depth import depth_budget
from .errors import PreconditionError
from .evaluator import Evaluator
from .players import GameSession, Player

logger = logging.getLogger(__name__)

Score = float
Players = Union[GameSession, Iterable[str]]


@dataclass
class SearchResult:
    best_move: Optional[int]
    score: Score
    nodes: int
    depth: int


class AIPlayer:
    """Plain minimax over every empty cell, cut off by a depth budget.

    Below the budget the position is scored by :class:`Evaluator`. There is
    no pruning and no caching: every branch is expanded on its own board
    clone. Ties are broken towards the later cell (``>=`` for the maximizing
    player, ``<=`` for everyone else).

    With three or more players every mover other than the maximizing player
    is treated as the same minimizing adversary.
    """

    def __init__(self, iteration_cap: int = ITERATION_CAP) -> None:
        self.config = SearchConfig(iteration_cap=iteration_cap)
        self._nodes = 0

    def choose_move(
        self,
        board: Board,
        session: GameSession,
        maximizing_marker: str,
        to_move_marker: Optional[str] = None,
    ) -> int:
        """Return the cell the player to move should mark.

        The caller's board is never modified. Raises :class:`PreconditionError`
        when the board has no empty cell or is already won.
        """
        result = self.search(board, session, maximizing_marker, to_move_marker)
        if result.best_move is None:
            raise PreconditionError(f"Board is already won by {board.winner()!r}")
        return result.best_move

    def search(
        self,
        board: Board,
        session: GameSession,
        maximizing_marker: str,
        to_move_marker: Optional[str] = None,
    ) -> SearchResult:
        maximizing = session.player_for(maximizing_marker)
        mover = maximizing if to_move_marker is None else session.player_for(to_move_marker)
        empty = board.unmarked_positions()
        if not empty:
            raise PreconditionError("No empty cells left to search")

        depth = depth_budget(len(empty), self.config.iteration_cap)
        logger.debug(
            "Searching %d empty cells for %s (to move: %s), depth budget %d",
            len(empty), maximizing.marker, mover.marker, depth,
        )

        # Search on a copy so the caller's board is never touched
        search_board = board.clone()
        self._nodes = 0
        score, best_move = self.minimax(search_board, session, maximizing, mover, depth)
        logger.debug("Chose %s with score %s after %d nodes", best_move, score, self._nodes)
        return SearchResult(best_move=best_move, score=score, nodes=self._nodes, depth=depth)

    def minimax(
        self,
        board: Board,
        session: GameSession,
        maximizing: Player,
        mover: Player,
        depth: int,
    ) -> Tuple[Score, Optional[int]]:
        winner = board.winner()
        if winner is not None:
            return (math.inf if winner == maximizing.marker else -math.inf), None
        if board.is_full():
            return 0, None
        if depth == 0:
            score = Evaluator.evaluate(board, session.other_markers(mover), mover == maximizing)
            return score, None

        is_maximizing = mover == maximizing
        best_score: Score = -math.inf if is_maximizing else math.inf
        best_move: Optional[int] = None
        following = session.next_player(mover)

        for position in board.unmarked_positions():
            child = board.clone()
            child[position] = mover.marker
            self._nodes += 1
            score, _ = self.minimax(child, session, maximizing, following, depth - 1)
            if is_maximizing:
                if score >= best_score:
                    best_score = score
                    best_move = position
            else:
                if score <= best_score:
                    best_score = score
                    best_move = position

        return best_score, best_move


def choose_move(
    board: Board,
    players: Players,
    maximizing_marker: str,
    to_move_marker: Optional[str] = None,
    iteration_cap: int = ITERATION_CAP,
) -> int:
    """Functional entry point: ``players`` is a session or the ordered markers."""
    session = players if isinstance(players, GameSession) else GameSession.from_markers(players)
    return AIPlayer(iteration_cap=iteration_cap).choose_move(board, session, maximizing_marker, to_move_marker)
