from backend.models.board import GRID_SIZE, Board, Direction, Position
from backend.models.difficulty import SCRAMBLE_STEPS, Difficulty

__all__ = [
    "GRID_SIZE",
    "SCRAMBLE_STEPS",
    "Board",
    "Difficulty",
    "Direction",
    "Position",
]
