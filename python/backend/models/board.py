"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

GRID_SIZE = 4


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    row: int
    col: int


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints. 0 represents the
    blank space.
    """

    size: int
    cells: list[int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int = GRID_SIZE) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return cls(size=size, cells=[*range(1, size * size), 0])

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be each of 0..{size * size - 1} exactly once."
            )
        return cls(size=size, cells=list(flat))

    # -- geometry -------------------------------------------------------------

    def check_index(self, index: int) -> None:
        if not 0 <= index < len(self.cells):
            raise IndexError(
                f"Cell index {index} out of range for a "
                f"{self.size}×{self.size} board."
            )

    def position(self, index: int) -> Position:
        return Position(*divmod(index, self.size))

    def index_of(self, row: int, col: int) -> int:
        return row * self.size + col

    def step(self, index: int, direction: Direction) -> int | None:
        """Index one step from *index* in *direction*, or None off the edge."""
        row, col = self.position(index)
        dr, dc = direction.delta
        nr, nc = row + dr, col + dc
        if 0 <= nr < self.size and 0 <= nc < self.size:
            return self.index_of(nr, nc)
        return None

    def neighbors(self, index: int) -> list[int]:
        """Orthogonal in-bounds neighbors, ordered up, down, left, right."""
        out: list[int] = []
        for direction in Direction:
            n = self.step(index, direction)
            if n is not None:
                out.append(n)
        return out

    def is_adjacent(self, a: int, b: int) -> bool:
        (ra, ca), (rb, cb) = self.position(a), self.position(b)
        return abs(ra - rb) + abs(ca - cb) == 1

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.cells.index(0)

    def get_tile(self, index: int) -> int:
        return self.cells[index]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.cells) - 1
        return self.cells[last] == 0 and all(
            v == i + 1 for i, v in enumerate(self.cells[:last])
        )

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        val = self.cells[index]
        if val == 0:
            return index == len(self.cells) - 1
        return index == val - 1

    def rows(self) -> list[list[int]]:
        return [
            self.cells[r * self.size : (r + 1) * self.size]
            for r in range(self.size)
        ]

    def as_tuple(self) -> tuple[int, ...]:
        return tuple(self.cells)

    # -- mutation -------------------------------------------------------------

    def swap(self, a: int, b: int) -> None:
        self.cells[a], self.cells[b] = self.cells[b], self.cells[a]

    def copy(self) -> Board:
        return Board(size=self.size, cells=self.cells[:])
