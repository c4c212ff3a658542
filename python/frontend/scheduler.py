"""Cancellable delayed reshuffle after a win."""

from __future__ import annotations

AUTO_RESET_DELAY = 3.0  # seconds


class DelayedReset:
    """One-shot deadline polled from a frontend's event loop.

    ``arm`` starts the countdown, ``cancel`` drops it (a manual reset must
    call this so a stale timer never replaces a newer session) and ``due``
    returns True exactly once when the deadline has passed.
    """

    def __init__(self, delay: float = AUTO_RESET_DELAY) -> None:
        self.delay = delay
        self._deadline: float | None = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def arm(self, now: float) -> None:
        if self._deadline is None:
            self._deadline = now + self.delay

    def cancel(self) -> None:
        self._deadline = None

    def remaining(self, now: float) -> float:
        if self._deadline is None:
            return 0.0
        return max(0.0, self._deadline - now)

    def due(self, now: float) -> bool:
        if self._deadline is None or now < self._deadline:
            return False
        self._deadline = None
        return True
