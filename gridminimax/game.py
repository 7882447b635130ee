from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

import logging

from .ai import AIPlayer
from .board import Board
from .config import DEFAULT_BOARD_WIDTH, DEFAULT_MARKERS
from .errors import PreconditionError
from .players import GameSession, Player

logger = logging.getLogger(__name__)

DRAW = "draw"


@dataclass
class MoveResult:
    position: int
    marker: str
    game_over: bool
    result: Optional[str]


class Game:
    """Owns the authoritative board and turn order for one round of play.

    The search engine only ever sees clones of ``self.board``; moves it
    returns are applied here through :meth:`push`.
    """

    def __init__(
        self,
        width: int = DEFAULT_BOARD_WIDTH,
        markers: Iterable[str] = DEFAULT_MARKERS,
        names: Optional[Sequence[Optional[str]]] = None,
    ) -> None:
        self.board = Board(width)
        self.session = GameSession.from_markers(markers, names)
        self.current_player: Player = self.session.first
        self.move_history: List[MoveResult] = []

    def reset(self) -> None:
        """Start a new round on the same board and players."""
        self.board.reset()
        self.current_player = self.session.first
        self.move_history = []

    def get_turn_marker(self) -> str:
        return self.current_player.marker

    def get_legal_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self.board.unmarked_positions()

    def is_game_over(self) -> bool:
        return self.board.someone_won() or self.board.is_full()

    def get_result(self) -> Optional[str]:
        """Winning marker, ``"draw"`` for a full board, or ``None`` mid-round."""
        winner = self.board.winner()
        if winner is not None:
            return winner
        if self.board.is_full():
            return DRAW
        return None

    def push(self, position: int) -> MoveResult:
        if self.is_game_over():
            raise PreconditionError("The round is already over")
        if not self.board.is_valid_position(position):
            raise PreconditionError(f"Invalid position: {position!r}")
        if not self.board.is_unmarked(position):
            raise PreconditionError(f"Position {position} is already taken")

        mover = self.current_player
        self.board[position] = mover.marker
        game_over = self.is_game_over()
        result = MoveResult(
            position=position,
            marker=mover.marker,
            game_over=game_over,
            result=self.get_result(),
        )
        self.move_history.append(result)
        if game_over:
            logger.info("Round over after %d moves: %s", len(self.move_history), result.result)
        else:
            self.current_player = self.session.next_player(mover)
        return result

    def ai_move(self, ai: AIPlayer) -> MoveResult:
        """Let ``ai`` pick and play the move for the current player."""
        marker = self.current_player.marker
        position = ai.choose_move(self.board, self.session, marker, marker)
        return self.push(position)

    def result_message(self, human_marker: Optional[str] = None) -> Optional[str]:
        result = self.get_result()
        if result is None:
            return None
        if result == DRAW:
            return "The board is full!"
        if result == human_marker:
            return "You won!"
        return f"{self.session.player_for(result).display_name} won!"

    def snapshot(self) -> Dict[str, object]:
        last_move: Optional[int] = None
        if self.move_history:
            last_move = self.move_history[-1].position

        snap = self.board.snapshot()
        snap.update(
            render=self.board.render(),
            players=[player.marker for player in self.session],
            turn=self.get_turn_marker(),
            legal_moves=self.get_legal_moves(),
            game_over=self.is_game_over(),
            result=self.get_result(),
            last_move=last_move,
        )
        return snap
