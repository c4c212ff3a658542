"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.difficulty import Difficulty


class GameSession:
    """Holds the current board, move counter, win flag and difficulty."""

    def __init__(self, board: Board, difficulty: Difficulty) -> None:
        self.board = board
        self.difficulty = difficulty
        self.moves: int = 0
        self.won: bool = board.is_solved()

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def refresh_won(self) -> bool:
        self.won = self.board.is_solved()
        return self.won

    def __repr__(self) -> str:
        return (
            f"GameSession(difficulty={self.difficulty.value!r}, "
            f"moves={self.moves}, won={self.won}, tiles={self.board.cells})"
        )
