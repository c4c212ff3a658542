"""Shared fixtures: scripted random sources for deterministic scrambles."""

from __future__ import annotations

from typing import Any, Sequence

import pytest


class ScriptedRandom:
    """Picks ``seq[pick % len(seq)]`` for each pick in a repeating script.

    ``shuffle`` swaps the first two items, so two calls undo each other.
    """

    def __init__(self, picks: Sequence[int] = (0,)) -> None:
        self.picks = list(picks)
        self.calls = 0

    def choice(self, seq: Sequence[Any]) -> Any:
        pick = self.picks[self.calls % len(self.picks)]
        self.calls += 1
        return seq[pick % len(seq)]

    def shuffle(self, x: list[Any]) -> None:
        self.calls += 1
        x[0], x[1] = x[1], x[0]


@pytest.fixture
def scripted() -> type[ScriptedRandom]:
    return ScriptedRandom
