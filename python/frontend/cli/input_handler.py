"""Single-keypress reader for the terminal frontend.

Arrow keys, WASD, difficulty digits and a few commands are read without
waiting for Enter, via tty/termios on POSIX and msvcrt on Windows.
"""

from __future__ import annotations

import os
import sys

# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    **dict.fromkeys("wW", "up"),
    **dict.fromkeys("sS", "down"),
    **dict.fromkeys("aA", "left"),
    **dict.fromkeys("dD", "right"),
    "1": "easy",
    "2": "medium",
    "3": "hard",
    **dict.fromkeys("rR", "restart"),
    **dict.fromkeys("qQ\x03", "quit"),  # \x03 is Ctrl-C in raw mode
    "\r": "enter",
    "\n": "enter",
}

# final byte of ESC [ A/B/C/D
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string ("" if unrecognised)."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def resolve_escape(tail: str) -> str:
    """Map the bytes following ESC to an action (bare Escape quits)."""
    if not tail:
        return "quit"
    if tail[0] == "[" and len(tail) > 1:
        return _ARROW_MAP.get(tail[1], "")
    return "quit" if tail[0] != "[" else ""


# -- platform readers ----------------------------------------------------------


def _read_posix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _byte(wait: float | None) -> str:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return ""
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = _byte(timeout)
        if not ch:
            return None
        if ch != "\x1b":
            return resolve(ch)
        tail = _byte(0.1)
        if tail == "[":
            tail += _byte(0.1)
        return resolve_escape(tail)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    end = None if timeout is None else time.monotonic() + timeout
    while end is None or time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                code = msvcrt.getwch()
                return {"H": "up", "P": "down", "M": "right", "K": "left"}.get(code, "")
            if ch == "\x1b":
                return "quit"
            return resolve(ch)
        time.sleep(0.02)
    return None


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "easy", "medium", "hard"       — 1 / 2 / 3
        "restart"                      — r
        "quit"                         — q / Ctrl-C / Escape
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    reader = _read_windows if os.name == "nt" else _read_posix
    key = reader(None)
    return key or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but return ``None`` after *timeout* seconds."""
    reader = _read_windows if os.name == "nt" else _read_posix
    return reader(timeout)
