from backend.engine.gameplay.game import (
    MoveOutcome,
    MoveResult,
    PuzzleEngine,
    UnsolvableBoardError,
)
from backend.engine.gameplay.gesture import translate_gesture

__all__ = [
    "MoveOutcome",
    "MoveResult",
    "PuzzleEngine",
    "UnsolvableBoardError",
    "translate_gesture",
]
