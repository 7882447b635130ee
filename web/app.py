from __future__ import annotations

from flask import Flask, jsonify, request
import sys
import threading
from pathlib import Path
from typing import Any, Mapping, Optional

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from gridminimax import AIPlayer, ConfigurationError, Game, GridMinimaxError, PreconditionError
from gridminimax.config import DEFAULT_BOARD_WIDTH, DEFAULT_MARKERS, ITERATION_CAP


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(
        BOARD_WIDTH=DEFAULT_BOARD_WIDTH,
        # Widest board /api/new accepts
        MAX_BOARD_WIDTH=4,
        MARKERS=list(DEFAULT_MARKERS),
        HUMAN_MARKER=DEFAULT_MARKERS[0],
        ITERATION_CAP=ITERATION_CAP,
    )
    app.config.from_prefixed_env("GRIDMINIMAX")
    if test_config is not None:
        app.config.update(test_config)

    # Fail fast on a bad cap or width before any request is served
    ai = AIPlayer(iteration_cap=int(app.config["ITERATION_CAP"]))
    if int(app.config["BOARD_WIDTH"]) > int(app.config["MAX_BOARD_WIDTH"]):
        raise ConfigurationError("BOARD_WIDTH exceeds MAX_BOARD_WIDTH")
    state = {
        "game": Game(int(app.config["BOARD_WIDTH"]), app.config["MARKERS"]),
        "human": app.config["HUMAN_MARKER"],
    }
    lock = threading.Lock()

    def run_ai_turns() -> Optional[int]:
        game: Game = state["game"]
        ai_move: Optional[int] = None
        while not game.is_game_over() and game.get_turn_marker() != state["human"]:
            ai_move = game.ai_move(ai).position
        return ai_move

    def respond(ai_move: Optional[int]):
        game: Game = state["game"]
        snap = game.snapshot()
        snap["human"] = state["human"]
        snap["ai_move"] = ai_move
        snap["message"] = game.result_message(state["human"])
        return jsonify(snap)

    @app.errorhandler(GridMinimaxError)
    def handle_game_error(exc: GridMinimaxError):
        app.logger.info("Rejected request: %s", exc)
        return jsonify({"error": str(exc)}), 400

    @app.get("/api/state")
    def api_state():
        with lock:
            return respond(None)

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        width = _as_int(data.get("width", app.config["BOARD_WIDTH"]), "width")
        max_width = int(app.config["MAX_BOARD_WIDTH"])
        if width > max_width:
            raise ConfigurationError(f"Board width must be at most {max_width}, got {width}")
        markers = data.get("markers") or app.config["MARKERS"]
        human = data.get("human") or app.config["HUMAN_MARKER"]
        if not isinstance(markers, list):
            raise PreconditionError("markers must be a list")

        game = Game(width, markers)
        game.session.player_for(human)

        with lock:
            state["game"] = game
            state["human"] = human
            # If the human does not move first, the computer opens
            ai_move = run_ai_turns()
            return respond(ai_move)

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        if "position" not in payload:
            return jsonify({"error": "Missing position"}), 400
        position = _as_int(payload["position"], "position")

        with lock:
            game: Game = state["game"]
            if game.get_turn_marker() != state["human"] and not game.is_game_over():
                raise PreconditionError("It is not your turn")
            game.push(position)
            ai_move = run_ai_turns()
            return respond(ai_move)

    @app.post("/api/reset")
    def api_reset():
        with lock:
            state["game"].reset()
            ai_move = run_ai_turns()
            return respond(ai_move)

    return app


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise PreconditionError(f"{name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise PreconditionError(f"{name} must be an integer") from None


app = create_app()

if __name__ == "__main__":
    app.run(host="127.0.0.1", port=5000, debug=True)
