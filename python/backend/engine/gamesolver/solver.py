"""Solvability check for sliding puzzle arrangements."""

from __future__ import annotations

from backend.models.board import Board


class Solver:
    """Stateless parity checks — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count pairs of non-blank tiles that are out of order in reading order."""
        tiles = [v for v in board.cells if v != 0]
        return sum(
            1
            for i, a in enumerate(tiles)
            for b in tiles[i + 1 :]
            if a > b
        )

    @staticmethod
    def blank_row_from_bottom(board: Board) -> int:
        """1-based row of the blank counted from the bottom edge."""
        return board.size - board.blank_index // board.size

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd widths: the inversion count must be even.  Even widths: the
        inversion count plus the blank's row from the bottom must be odd,
        which holds for the goal state (0 inversions, blank on row 1).
        """
        inversions = Solver.inversions(board)
        if board.size % 2 == 1:
            return inversions % 2 == 0
        return (inversions + Solver.blank_row_from_bottom(board)) % 2 == 1
