"""PuzzleEngine: reset, tap moves, swipe moves and win detection."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from backend.engine.gameplay import (
    MoveOutcome,
    PuzzleEngine,
    UnsolvableBoardError,
)
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction
from backend.models.difficulty import Difficulty

SOLVED = tuple([*range(1, 16), 0])


# -- helpers ------------------------------------------------------------------


def _engine(flat: list[int]) -> PuzzleEngine:
    return PuzzleEngine.from_board(Board.from_flat(4, flat))


def _snapshot(engine: PuzzleEngine) -> tuple:
    return engine.tiles, engine.moves, engine.won


# -- reset --------------------------------------------------------------------


def test_reset_starts_fresh_session() -> None:
    engine = PuzzleEngine(Difficulty.EASY, rng=random.Random(1))
    engine.apply_move(engine.board.neighbors(engine.board.blank_index)[0])
    assert engine.moves == 1

    session = engine.reset(Difficulty.HARD)
    assert session is engine.session
    assert engine.moves == 0
    assert engine.difficulty is Difficulty.HARD
    assert Counter(engine.tiles) == Counter(range(16))


def test_reset_without_argument_keeps_difficulty() -> None:
    engine = PuzzleEngine(Difficulty.HARD, rng=random.Random(2))
    engine.reset()
    assert engine.difficulty is Difficulty.HARD


def test_reset_hard_follows_injected_rng(scripted) -> None:
    rng = scripted([0])
    engine = PuzzleEngine(Difficulty.HARD, rng=rng)
    assert rng.calls == 100
    assert engine.tiles == (1, 2, 3, 4, 5, 6, 7, 0, 9, 10, 11, 8, 13, 14, 15, 12)
    assert engine.moves == 0
    assert not engine.won


def test_reset_runs_win_check_on_scrambled_board(scripted) -> None:
    # a walk that retraces itself lands back on the goal state
    engine = PuzzleEngine(Difficulty.EASY, rng=scripted([0, 1]))
    assert engine.tiles == SOLVED
    assert engine.won
    assert engine.moves == 0


def test_reset_boards_are_solvable() -> None:
    engine = PuzzleEngine(rng=random.Random(8))
    for difficulty in list(Difficulty) * 20:
        engine.reset(difficulty)
        assert Solver.is_solvable(engine.board)


# -- importing arrangements ---------------------------------------------------


def test_from_board_rejects_unsolvable() -> None:
    with pytest.raises(UnsolvableBoardError):
        _engine([*range(1, 14), 15, 14, 0])


def test_from_board_rejects_malformed() -> None:
    with pytest.raises(ValueError):
        PuzzleEngine.from_board(Board(size=4, cells=[1] * 16))


def test_from_board_copies_cells() -> None:
    board = Board.from_flat(4, [*range(1, 15), 0, 15])
    engine = PuzzleEngine.from_board(board)
    engine.apply_move(15)
    assert board.cells[14:] == [0, 15]


# -- tap moves ----------------------------------------------------------------


def test_one_move_from_goal_wins() -> None:
    engine = _engine([*range(1, 15), 0, 15])
    assert not engine.won

    result = engine.apply_move(15)

    assert result.accepted
    assert result.outcome is MoveOutcome.MOVED
    assert result.tiles == SOLVED == engine.tiles
    assert result.moves == engine.moves == 1
    assert result.won and engine.won


def test_leaving_goal_clears_won() -> None:
    engine = PuzzleEngine.from_board(Board.solved())
    assert engine.won
    result = engine.apply_move(11)
    assert result.accepted
    assert not result.won and not engine.won


def test_tapping_blank_is_rejected() -> None:
    engine = _engine([*range(1, 15), 0, 15])
    before = _snapshot(engine)
    result = engine.apply_move(14)
    assert result.outcome is MoveOutcome.EMPTY_SLOT
    assert not result.accepted
    assert _snapshot(engine) == before


@pytest.mark.parametrize("index", [0, 9, 12, 3])
def test_non_adjacent_tap_is_rejected(index: int) -> None:
    # blank at 14: 9 is diagonal, 12 two cells away in the same row
    engine = _engine([*range(1, 15), 0, 15])
    before = _snapshot(engine)
    result = engine.apply_move(index)
    assert result.outcome is MoveOutcome.NOT_ADJACENT
    assert (result.tiles, result.moves, result.won) == before
    assert _snapshot(engine) == before


def test_row_wrap_is_not_adjacent() -> None:
    # blank at index 4 (row 1, col 0); index 3 ends row 0
    engine = _engine([1, 2, 3, 4, 0, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15])
    assert engine.apply_move(3).outcome is MoveOutcome.NOT_ADJACENT
    assert engine.apply_move(0).accepted


@pytest.mark.parametrize("index", [-1, 16, 100])
def test_out_of_range_index_raises(index: int) -> None:
    engine = PuzzleEngine.from_board(Board.solved())
    with pytest.raises(IndexError):
        engine.apply_move(index)
    with pytest.raises(IndexError):
        engine.apply_directional_move(index, Direction.UP)


# -- directional moves --------------------------------------------------------


def test_swipe_must_point_at_blank() -> None:
    # the direction is the way the tile travels: blank at 15 sits directly
    # below tile 12 (index 11), so only DOWN slides it
    engine = PuzzleEngine.from_board(Board.solved())

    wrong = engine.apply_directional_move(11, Direction.LEFT)
    assert wrong.outcome is MoveOutcome.WRONG_DIRECTION
    assert engine.moves == 0

    assert engine.apply_move(11).accepted  # a tap would have worked
    engine.apply_move(15)  # undo

    right = engine.apply_directional_move(11, Direction.DOWN)
    assert right.accepted
    assert engine.tiles[15] == 12 and engine.tiles[11] == 0


@pytest.mark.parametrize(
    ("index", "direction", "outcome"),
    [
        (14, Direction.RIGHT, MoveOutcome.MOVED),
        (14, Direction.UP, MoveOutcome.WRONG_DIRECTION),
        (14, Direction.LEFT, MoveOutcome.WRONG_DIRECTION),
        (13, Direction.RIGHT, MoveOutcome.NOT_ADJACENT),
        (0, Direction.LEFT, MoveOutcome.NOT_ADJACENT),
        (15, Direction.LEFT, MoveOutcome.EMPTY_SLOT),
    ],
)
def test_swipe_outcomes(
    index: int, direction: Direction, outcome: MoveOutcome
) -> None:
    engine = PuzzleEngine.from_board(Board.solved())
    result = engine.apply_directional_move(index, direction)
    assert result.outcome is outcome
    assert engine.moves == (1 if outcome is MoveOutcome.MOVED else 0)


# -- keyboard moves -----------------------------------------------------------


def test_keyboard_move_slides_neighbor_of_blank() -> None:
    engine = PuzzleEngine.from_board(Board.solved())
    assert engine.move(Direction.UP).outcome is MoveOutcome.NOT_ADJACENT
    assert engine.move(Direction.LEFT).outcome is MoveOutcome.NOT_ADJACENT

    result = engine.move(Direction.RIGHT)  # tile 15 slides right
    assert result.accepted
    assert engine.tiles[14:] == (0, 15)
    assert engine.move(Direction.LEFT).won


# -- properties ---------------------------------------------------------------


def test_random_play_keeps_invariants() -> None:
    rng = random.Random(42)
    engine = PuzzleEngine(Difficulty.MEDIUM, rng=random.Random(0))
    moves = 0
    for _ in range(2000):
        roll = rng.random()
        if roll < 0.02:
            engine.reset(rng.choice(list(Difficulty)))
            moves = 0
            continue
        index = rng.randrange(16)
        if roll < 0.5:
            result = engine.apply_move(index)
        else:
            result = engine.apply_directional_move(index, rng.choice(list(Direction)))
        if result.accepted:
            moves += 1
        assert engine.moves == result.moves == moves
        assert Counter(engine.tiles) == Counter(range(16))
        assert engine.won == (engine.tiles == SOLVED)
