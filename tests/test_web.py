from __future__ import annotations

import pytest

from gridminimax import ConfigurationError
from web import create_app


@pytest.fixture()
def client():
    # Small cap keeps computer replies to a two-ply search
    app = create_app({"ITERATION_CAP": 100, "TESTING": True})
    return app.test_client()


def test_new_game_waits_for_human(client):
    r = client.post("/api/new", json={})
    assert r.status_code == 200
    data = r.get_json()
    assert data["turn"] == "X"
    assert data["human"] == "X"
    assert data["ai_move"] is None
    assert data["legal_moves"] == list(range(1, 10))


def test_move_gets_a_reply(client):
    client.post("/api/new", json={})
    r = client.post("/api/move", json={"position": 5})
    assert r.status_code == 200
    data = r.get_json()
    assert data["ai_move"] in range(1, 10)
    assert data["ai_move"] != 5
    assert data["turn"] == "X"
    cells = [cell for row in data["rows"] for cell in row]
    assert cells.count("X") == 1
    assert cells.count("O") == 1


def test_computer_opens_when_human_plays_second(client):
    r = client.post("/api/new", json={"human": "O"})
    assert r.status_code == 200
    data = r.get_json()
    assert data["ai_move"] is not None
    assert data["turn"] == "O"


def test_three_player_game_runs_both_computers(client):
    r = client.post("/api/new", json={"width": 4, "markers": ["X", "O", "Z"], "human": "O"})
    data = r.get_json()
    assert r.status_code == 200
    assert data["turn"] == "O"
    cells = [cell for row in data["rows"] for cell in row]
    assert cells.count("X") == 1

    r = client.post("/api/move", json={"position": 16})
    data = r.get_json()
    cells = [cell for row in data["rows"] for cell in row]
    assert (cells.count("X"), cells.count("O"), cells.count("Z")) == (2, 1, 1)


def test_bad_requests_return_400(client):
    client.post("/api/new", json={})
    assert client.post("/api/move", json={}).status_code == 400
    assert client.post("/api/move", json={"position": "abc"}).status_code == 400
    assert client.post("/api/move", json={"position": 42}).status_code == 400
    assert client.post("/api/new", json={"width": 2}).status_code == 400
    assert client.post("/api/new", json={"markers": ["X", "X"]}).status_code == 400
    assert client.post("/api/new", json={"human": "Q"}).status_code == 400

    client.post("/api/new", json={})
    client.post("/api/move", json={"position": 5})
    r = client.post("/api/move", json={"position": 5})
    assert r.status_code == 400
    assert "already taken" in r.get_json()["error"]


def test_state_and_reset(client):
    client.post("/api/new", json={})
    client.post("/api/move", json={"position": 1})
    r = client.get("/api/state")
    assert r.get_json()["last_move"] is not None

    r = client.post("/api/reset")
    data = r.get_json()
    assert data["legal_moves"] == list(range(1, 10))
    assert data["result"] is None


def test_oversized_board_is_rejected_before_any_search(client):
    client.post("/api/new", json={})
    r = client.post("/api/new", json={"width": 50, "human": "O"})
    assert r.status_code == 400
    assert "at most" in r.get_json()["error"]

    r = client.post("/api/new", json={"width": 5})
    assert r.status_code == 400

    # The previous game is left in place
    r = client.get("/api/state")
    assert r.get_json()["width"] == 3


def test_max_board_width_is_configurable():
    app = create_app({"ITERATION_CAP": 100, "MAX_BOARD_WIDTH": 5})
    client = app.test_client()
    r = client.post("/api/new", json={"width": 5})
    assert r.status_code == 200
    assert r.get_json()["width"] == 5
    assert client.post("/api/new", json={"width": 6}).status_code == 400

    with pytest.raises(ConfigurationError):
        create_app({"BOARD_WIDTH": 5, "MAX_BOARD_WIDTH": 4})
