"""Board model: construction, geometry and goal checks."""

from __future__ import annotations

import pytest

from backend.models.board import GRID_SIZE, Board, Direction, Position

SOLVED_4 = [*range(1, 16), 0]


def test_solved_board_layout() -> None:
    board = Board.solved()
    assert board.size == GRID_SIZE == 4
    assert board.cells == SOLVED_4
    assert board.blank_index == 15
    assert board.is_solved()


@pytest.mark.parametrize(
    "flat",
    [
        [*range(1, 15), 0],  # too short
        [*range(1, 16), 1],  # duplicate, no blank
        [*range(1, 15), 0, 16],  # label out of range
    ],
)
def test_from_flat_rejects_malformed(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(4, flat)


def test_from_flat_copies_input() -> None:
    flat = SOLVED_4[:]
    board = Board.from_flat(4, flat)
    flat[0] = 99
    assert board.cells[0] == 1


@pytest.mark.parametrize(
    ("index", "expected"),
    [(0, Position(0, 0)), (3, Position(0, 3)), (6, Position(1, 2)), (15, Position(3, 3))],
)
def test_position_is_row_major(index: int, expected: Position) -> None:
    board = Board.solved()
    assert board.position(index) == expected
    assert board.index_of(*expected) == index


@pytest.mark.parametrize(
    ("index", "expected"),
    [
        (0, [4, 1]),
        (3, [7, 2]),
        (5, [1, 9, 4, 6]),
        (15, [11, 14]),
    ],
)
def test_neighbors_are_in_bounds_and_ordered(index: int, expected: list[int]) -> None:
    assert Board.solved().neighbors(index) == expected


def test_step_off_the_edge_is_none() -> None:
    board = Board.solved()
    assert board.step(0, Direction.UP) is None
    assert board.step(0, Direction.LEFT) is None
    assert board.step(3, Direction.RIGHT) is None
    assert board.step(12, Direction.DOWN) is None
    assert board.step(5, Direction.RIGHT) == 6


def test_adjacency_excludes_diagonals_and_row_wrap() -> None:
    board = Board.solved()
    assert board.is_adjacent(5, 6)
    assert board.is_adjacent(5, 9)
    assert not board.is_adjacent(5, 10)  # diagonal
    assert not board.is_adjacent(3, 4)  # consecutive indices, different rows


def test_check_index_bounds() -> None:
    board = Board.solved()
    board.check_index(0)
    board.check_index(15)
    for bad in (-1, 16):
        with pytest.raises(IndexError):
            board.check_index(bad)


def test_tile_correctness_and_rows() -> None:
    board = Board.from_flat(4, [*range(1, 15), 0, 15])
    assert not board.is_solved()
    assert board.is_tile_correct(0)
    assert not board.is_tile_correct(14)  # blank away from home
    assert not board.is_tile_correct(15)
    assert board.rows()[3] == [13, 14, 0, 15]


def test_copy_is_independent() -> None:
    board = Board.solved()
    clone = board.copy()
    clone.swap(14, 15)
    assert board.is_solved()
    assert clone.cells[-2:] == [0, 15]


def test_direction_helpers() -> None:
    assert Direction.UP.delta == (-1, 0)
    assert Direction.RIGHT.delta == (0, 1)
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.DOWN.opposite is Direction.UP
