"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.gamegenerator import GameGenerator, RandomSource
from backend.engine.gameplay.gesture import translate_gesture
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameSession
from backend.models.board import GRID_SIZE, Board, Direction
from backend.models.difficulty import Difficulty


class UnsolvableBoardError(ValueError):
    """Raised when an imported arrangement cannot reach the goal state."""


class MoveOutcome(StrEnum):
    MOVED = "moved"
    EMPTY_SLOT = "empty_slot"
    NOT_ADJACENT = "not_adjacent"
    WRONG_DIRECTION = "wrong_direction"


@dataclass(frozen=True)
class MoveResult:
    """Snapshot of the session after a move attempt."""

    outcome: MoveOutcome
    tiles: tuple[int, ...]
    moves: int
    won: bool

    @property
    def accepted(self) -> bool:
        return self.outcome is MoveOutcome.MOVED


class PuzzleEngine:
    """Owns a single game session and applies moves to it.

    Rejected moves are reported through :class:`MoveResult` and leave the
    session untouched; only out-of-range cell indices raise.
    """

    translate_gesture = staticmethod(translate_gesture)

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: RandomSource | None = None,
        size: int = GRID_SIZE,
    ) -> None:
        self.size = size
        self._rng = rng or random.Random()
        self.session = self.reset(difficulty)

    @classmethod
    def from_board(
        cls,
        board: Board,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: RandomSource | None = None,
    ) -> "PuzzleEngine":
        """Create an engine around an existing arrangement.

        Raises :class:`UnsolvableBoardError` if *board* fails the parity check.
        """
        board = Board.from_flat(board.size, board.cells)
        if not Solver.is_solvable(board):
            raise UnsolvableBoardError(
                f"Arrangement {board.cells} cannot reach the solved state."
            )
        obj = object.__new__(cls)
        obj.size = board.size
        obj._rng = rng or random.Random()
        obj.session = GameSession(board, difficulty)
        return obj

    # -- lifecycle ------------------------------------------------------------

    def reset(self, difficulty: Difficulty | None = None) -> GameSession:
        """Replace the session with a freshly scrambled board."""
        if difficulty is None:
            difficulty = self.session.difficulty
        board = GameGenerator.generate(difficulty, self._rng, self.size)
        self.session = GameSession(board, difficulty)
        return self.session

    # -- movement -------------------------------------------------------------

    def apply_move(self, index: int) -> MoveResult:
        """Slide the tile at *index* into the blank if they are adjacent."""
        board = self.session.board
        board.check_index(index)

        if board.get_tile(index) == 0:
            return self._result(MoveOutcome.EMPTY_SLOT)
        blank = board.blank_index
        if not board.is_adjacent(index, blank):
            return self._result(MoveOutcome.NOT_ADJACENT)
        return self._commit(index, blank)

    def apply_directional_move(self, index: int, direction: Direction) -> MoveResult:
        """Slide the tile at *index* in *direction*.

        Accepted only when the blank lies exactly one step from the tile in
        that direction; an adjacent blank on another side is rejected.
        """
        board = self.session.board
        board.check_index(index)

        if board.get_tile(index) == 0:
            return self._result(MoveOutcome.EMPTY_SLOT)
        blank = board.blank_index
        if board.step(index, direction) != blank:
            if board.is_adjacent(index, blank):
                return self._result(MoveOutcome.WRONG_DIRECTION)
            return self._result(MoveOutcome.NOT_ADJACENT)
        return self._commit(index, blank)

    def move(self, direction: Direction) -> MoveResult:
        """Slide whichever tile can travel in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        board = self.session.board
        source = board.step(board.blank_index, direction.opposite)
        if source is None:
            return self._result(MoveOutcome.NOT_ADJACENT)
        return self.apply_directional_move(source, direction)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.session.board

    @property
    def tiles(self) -> tuple[int, ...]:
        return self.session.board.as_tuple()

    @property
    def moves(self) -> int:
        return self.session.moves

    @property
    def won(self) -> bool:
        return self.session.won

    @property
    def difficulty(self) -> Difficulty:
        return self.session.difficulty

    # -- helpers --------------------------------------------------------------

    def _commit(self, index: int, blank: int) -> MoveResult:
        self.session.board.swap(index, blank)
        self.session.increment_moves()
        self.session.refresh_won()
        return self._result(MoveOutcome.MOVED)

    def _result(self, outcome: MoveOutcome) -> MoveResult:
        s = self.session
        return MoveResult(
            outcome=outcome, tiles=s.board.as_tuple(), moves=s.moves, won=s.won
        )
