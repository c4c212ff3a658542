"""Stable per-tile identity tokens for animating slides.

The engine only knows labels; renderers need something that follows a
physical tile from cell to cell so a move can be drawn as a slide rather
than a redraw.
"""

from __future__ import annotations

import uuid


class TileTokens:
    """Opaque token per cell, reassigned on reset and carried across swaps."""

    def __init__(self, count: int) -> None:
        self.tokens: list[str] = []
        self.reassign(count)

    def reassign(self, count: int) -> None:
        self.tokens = [uuid.uuid4().hex for _ in range(count)]

    def swap(self, a: int, b: int) -> None:
        self.tokens[a], self.tokens[b] = self.tokens[b], self.tokens[a]

    def follow(self, before: tuple[int, ...], after: tuple[int, ...]) -> None:
        """Carry tokens across a single move from *before* to *after*."""
        changed = [i for i, (x, y) in enumerate(zip(before, after)) if x != y]
        if len(changed) == 2:
            self.swap(*changed)

    def index_of(self, token: str) -> int:
        return self.tokens.index(token)

    def __getitem__(self, index: int) -> str:
        return self.tokens[index]

    def __len__(self) -> int:
        return len(self.tokens)
