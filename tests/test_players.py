from __future__ import annotations

import pytest

from gridminimax import GameSession, Player, PreconditionError, next_player


def test_next_player_wraps_around():
    session = GameSession.from_markers(["X", "O", "Z"])
    x, o, z = session.players
    assert next_player(x, session.players) == o
    assert next_player(o, session.players) == z
    assert next_player(z, session.players) == x
    assert session.next_player(z) == x


def test_next_player_requires_membership():
    session = GameSession.from_markers(["X", "O"])
    with pytest.raises(PreconditionError):
        next_player(Player(marker="Q", index=5), session.players)


def test_session_rejects_duplicate_and_invalid_markers():
    with pytest.raises(PreconditionError):
        GameSession.from_markers(["X", "X"])
    with pytest.raises(PreconditionError):
        GameSession.from_markers(["X", " "])
    with pytest.raises(PreconditionError):
        GameSession.from_markers(["X", "OO"])
    with pytest.raises(PreconditionError):
        GameSession.from_markers(["X"])


def test_player_lookup_and_other_markers():
    session = GameSession.from_markers(["X", "O", "Z"], names=["Ada", None, "Zed"])
    o = session.player_for("O")
    assert o.index == 1
    assert o.display_name == "O"
    assert session.player_for("X").display_name == "Ada"
    assert session.markers == {"X", "O", "Z"}
    assert session.other_markers(o) == {"X", "Z"}
    assert session.first.marker == "X"
    assert len(session) == 3
    assert [player.marker for player in session] == ["X", "O", "Z"]

    with pytest.raises(PreconditionError):
        session.player_for("Q")
