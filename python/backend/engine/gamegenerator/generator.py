"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random
from typing import Any, Protocol, Sequence

from backend.engine.gamesolver import Solver
from backend.models.board import GRID_SIZE, Board
from backend.models.difficulty import Difficulty


class RandomSource(Protocol):
    """The slice of :class:`random.Random` the generator relies on."""

    def choice(self, seq: Sequence[Any]) -> Any: ...

    def shuffle(self, x: list[Any]) -> None: ...


class GameGenerator:
    """Creates solvable puzzles by walking random legal moves from the solved state."""

    @staticmethod
    def solved(size: int = GRID_SIZE) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(board: Board, steps: int, rng: RandomSource | None = None) -> None:
        """Scramble *board* in-place with exactly *steps* random blank moves.

        Every step swaps the blank with one of its in-bounds neighbors
        (ordered up, down, left, right), chosen uniformly, so the result
        stays reachable from the starting arrangement.
        """
        if steps < 0:
            raise ValueError(f"Scramble steps must be non-negative, got {steps}.")
        rng = rng or random.Random()
        blank = board.blank_index
        for _ in range(steps):
            target = rng.choice(board.neighbors(blank))
            board.swap(blank, target)
            blank = target

    @staticmethod
    def generate(
        difficulty: Difficulty,
        rng: RandomSource | None = None,
        size: int = GRID_SIZE,
    ) -> Board:
        """Return a board scrambled by ``difficulty.steps`` random moves.

        The board may come back solved (e.g. a walk that retraces itself);
        callers run the win check rather than relying on it being scrambled.
        """
        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, difficulty.steps, rng)
        return board

    @staticmethod
    def permutation(size: int = GRID_SIZE, rng: RandomSource | None = None) -> Board:
        """Return a uniformly shuffled board, retrying until it is solvable.

        Half of all permutations are solvable, so this terminates quickly in
        practice, but it offers no difficulty control.
        """
        rng = rng or random.Random()
        cells = [*range(1, size * size), 0]
        while True:
            rng.shuffle(cells)
            board = Board(size=size, cells=cells[:])
            if Solver.is_solvable(board):
                return board
