from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from .config import DEFAULT_MARKERS, EMPTY_MARKER
from .errors import PreconditionError


@dataclass(frozen=True)
class Player:
    marker: str
    index: int
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.marker


def next_player(current: Player, ordered_players: Sequence[Player]) -> Player:
    """Return the player after ``current``, wrapping from the last to the first."""
    try:
        position = list(ordered_players).index(current)
    except ValueError:
        raise PreconditionError(f"Player {current.marker!r} is not part of the turn order") from None
    return ordered_players[(position + 1) % len(ordered_players)]


@dataclass(frozen=True)
class GameSession:
    """Ordered players of one game; owns turn order and marker collision checks."""

    players: Tuple[Player, ...]
    _markers: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.players) < 2:
            raise PreconditionError("A game needs at least two players")
        seen: List[str] = []
        for player in self.players:
            marker = player.marker
            if not isinstance(marker, str) or len(marker) != 1 or marker == EMPTY_MARKER:
                raise PreconditionError(f"Invalid marker: {marker!r}")
            if marker in seen:
                raise PreconditionError(f"Marker {marker!r} is already taken")
            seen.append(marker)
        object.__setattr__(self, "_markers", frozenset(seen))

    @classmethod
    def from_markers(
        cls,
        markers: Iterable[str] = DEFAULT_MARKERS,
        names: Optional[Sequence[Optional[str]]] = None,
    ) -> "GameSession":
        markers = list(markers)
        names = list(names) if names is not None else [None] * len(markers)
        if len(names) != len(markers):
            raise PreconditionError("Every player needs exactly one name entry")
        return cls(
            tuple(Player(marker=m, index=i, name=n) for i, (m, n) in enumerate(zip(markers, names)))
        )

    @property
    def markers(self) -> FrozenSet[str]:
        return self._markers

    @property
    def first(self) -> Player:
        return self.players[0]

    def player_for(self, marker: str) -> Player:
        for player in self.players:
            if player.marker == marker:
                return player
        raise PreconditionError(f"No player uses marker {marker!r}")

    def next_player(self, current: Player) -> Player:
        return next_player(current, self.players)

    def other_markers(self, player: Player) -> FrozenSet[str]:
        """Markers of every player except ``player``."""
        return self.markers - {player.marker}

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)
