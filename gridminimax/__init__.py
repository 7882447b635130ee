"""Grid game search engine: board model, heuristic evaluation, and minimax.

Modules:
- board: N x N board with winning-line geometry and cloning
- players: players, game sessions, and cyclic turn order
- depth: depth budget under an iteration cap
- evaluator: live-line heuristic for positions below the depth budget
- ai: plain minimax search choosing a move for the maximizing player
- game: one round of play over a session, applying chosen moves
"""

from .ai import AIPlayer, SearchResult, choose_move
from .board import Board
from .depth import depth_budget, depth_budget_for_width
from .errors import ConfigurationError, GridMinimaxError, PreconditionError
from .evaluator import Evaluator
from .game import Game
from .players import GameSession, Player, next_player

__all__ = [
    "AIPlayer",
    "Board",
    "ConfigurationError",
    "Evaluator",
    "Game",
    "GameSession",
    "GridMinimaxError",
    "Player",
    "PreconditionError",
    "SearchResult",
    "choose_move",
    "depth_budget",
    "depth_budget_for_width",
    "next_player",
]
