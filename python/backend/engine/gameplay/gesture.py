"""Maps raw pointer drags to logical swipe directions."""

from __future__ import annotations

from backend.models.board import Direction


def translate_gesture(dx: float, dy: float) -> Direction:
    """Return the swipe direction for a drag of (*dx*, *dy*) screen units.

    The dominant axis wins; ties fall to the vertical axis.  Screen y grows
    downward, and a zero component counts as non-positive, so a zero drag
    reads as ``UP``.
    """
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
