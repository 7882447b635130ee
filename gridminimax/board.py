from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

from .config import DEFAULT_BOARD_WIDTH, EMPTY_MARKER, MAX_BOARD_WIDTH, MIN_BOARD_WIDTH
from .errors import ConfigurationError, PreconditionError

Line = Tuple[int, ...]


@lru_cache(maxsize=None)
def _build_winning_lines(width: int) -> Tuple[Line, ...]:
    """Rows, then columns, then the two full diagonals, as 1-based positions."""
    rows = [tuple(r * width + c + 1 for c in range(width)) for r in range(width)]
    cols = [tuple(r * width + c + 1 for r in range(width)) for c in range(width)]
    diagonals = [
        tuple(i * width + i + 1 for i in range(width)),
        tuple(i * width + (width - 1 - i) + 1 for i in range(width)),
    ]
    return tuple(rows + cols + diagonals)


@lru_cache(maxsize=None)
def _build_lines_by_cell(width: int) -> Dict[int, Tuple[Line, ...]]:
    lines = _build_winning_lines(width)
    return {
        cell: tuple(line for line in lines if cell in line)
        for cell in range(1, width * width + 1)
    }


class Board:
    """Square grid of cells addressed 1..width**2 in row-major order.

    A board is treated as a value by the search: every hypothetical move is
    played on a ``clone()`` so sibling branches never share cells.
    """

    def __init__(self, width: int = DEFAULT_BOARD_WIDTH) -> None:
        if not isinstance(width, int) or isinstance(width, bool):
            raise ConfigurationError(f"Board width must be an integer, got {width!r}")
        if width < MIN_BOARD_WIDTH:
            raise ConfigurationError(
                f"Board width must be at least {MIN_BOARD_WIDTH}, got {width}"
            )
        if width > MAX_BOARD_WIDTH:
            raise ConfigurationError(
                f"Board width must be at most {MAX_BOARD_WIDTH}, got {width}"
            )
        self.width = width
        self._squares: Dict[int, str] = {}
        self._lines: Optional[Tuple[Line, ...]] = None
        self._lines_by_cell: Optional[Dict[int, Tuple[Line, ...]]] = None
        self.reset()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[str]]]) -> "Board":
        """Build a board from a list of rows; ``None`` or blank cells are empty."""
        width = len(rows)
        board = cls(width)
        for r, row in enumerate(rows):
            if len(row) != width:
                raise PreconditionError(
                    f"Row {r + 1} has {len(row)} cells, expected {width}"
                )
            for c, marker in enumerate(row):
                if marker is None or marker == EMPTY_MARKER or marker == "":
                    continue
                board.set(r * width + c + 1, marker)
        return board

    def reset(self) -> None:
        for position in range(1, self.size + 1):
            self._squares[position] = EMPTY_MARKER

    @property
    def size(self) -> int:
        return self.width * self.width

    @property
    def winning_lines(self) -> Tuple[Line, ...]:
        if self._lines is None:
            self._lines = _build_winning_lines(self.width)
        return self._lines

    def lines_through(self, position: int) -> Tuple[Line, ...]:
        """Winning lines that contain ``position``, shared by every board of that width."""
        if self._lines_by_cell is None:
            self._lines_by_cell = _build_lines_by_cell(self.width)
        return self._lines_by_cell[position]

    def markers_in(self, line: Line) -> Tuple[str, ...]:
        """Markers along one of this board's lines, read without position checks."""
        squares = self._squares
        return tuple(squares[position] for position in line)

    def is_valid_position(self, position: int) -> bool:
        return isinstance(position, int) and not isinstance(position, bool) and position in self._squares

    def marker_at(self, position: int) -> str:
        if not self.is_valid_position(position):
            raise PreconditionError(f"Invalid position: {position!r}")
        return self._squares[position]

    def set(self, position: int, marker: str) -> None:
        if not self.is_valid_position(position):
            raise PreconditionError(f"Invalid position: {position!r}")
        if not isinstance(marker, str) or len(marker) != 1:
            raise PreconditionError(f"Marker must be a single character, got {marker!r}")
        self._squares[position] = marker

    def __getitem__(self, position: int) -> str:
        return self.marker_at(position)

    def __setitem__(self, position: int, marker: str) -> None:
        self.set(position, marker)

    def is_unmarked(self, position: int) -> bool:
        return self.marker_at(position) == EMPTY_MARKER

    def unmarked_positions(self) -> List[int]:
        return [key for key, marker in self._squares.items() if marker == EMPTY_MARKER]

    def is_full(self) -> bool:
        return not self.unmarked_positions()

    def winner(self) -> Optional[str]:
        """Return the marker filling a winning line, or ``None``."""
        for line in self.winning_lines:
            first = self._squares[line[0]]
            if first == EMPTY_MARKER:
                continue
            if all(self._squares[position] == first for position in line):
                return first
        return None

    def someone_won(self) -> bool:
        return self.winner() is not None

    def clone(self) -> "Board":
        copy = Board.__new__(Board)
        copy.width = self.width
        copy._squares = dict(self._squares)
        # Lines are immutable tuples, safe to share between copies.
        copy._lines = self._lines
        copy._lines_by_cell = self._lines_by_cell
        return copy

    def to_rows(self) -> List[List[str]]:
        return [
            [self._squares[r * self.width + c + 1] for c in range(self.width)]
            for r in range(self.width)
        ]

    def render(self) -> str:
        """Draw the grid as text, e.g. ``' X | O |  '`` rows split by dividers."""
        divider = "+".join(["-----"] * self.width)
        spacer = "|".join(["     "] * self.width)
        lines: List[str] = []
        for r, row in enumerate(self.to_rows()):
            if r:
                lines.append(spacer)
                lines.append(divider)
            lines.append(spacer)
            lines.append("|".join(f"  {marker}  " for marker in row))
        lines.append(spacer)
        return "\n".join(lines)

    def snapshot(self) -> Dict[str, object]:
        return {
            "width": self.width,
            "rows": self.to_rows(),
            "unmarked": self.unmarked_positions(),
            "winner": self.winner(),
            "full": self.is_full(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.width == other.width and self._squares == other._squares

    def __repr__(self) -> str:
        cells = "".join(self._squares.values()).replace(EMPTY_MARKER, ".")
        return f"Board(width={self.width}, cells={cells!r})"
