#!/usr/bin/env python3
"""Slide Number — a 4×4 sliding-tile puzzle.

Usage::

    python main.py                      # interactive menu
    python main.py -f rich -d hard      # Rich terminal, hard scramble
    python main.py -f pygame            # Pygame GUI
    python main.py -f pyqt -d easy      # PyQt GUI
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.difficulty import Difficulty  # noqa: E402

# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _launch(frontend: Frontend, difficulty: Difficulty) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(difficulty=difficulty)


def _ask_difficulty(default: Difficulty) -> Difficulty:
    names = "/".join(d.value for d in Difficulty)
    raw = input(f"  Difficulty ({names}, default {default.value}): ").strip().lower()
    if not raw:
        return default
    try:
        return Difficulty(raw)
    except ValueError:
        print(f"  Unknown difficulty, using {default.value}.")
        return default


def _menu_loop(difficulty: Difficulty) -> None:
    choices = {"1": Frontend.rich, "2": Frontend.pygame, "3": Frontend.pyqt}
    while True:
        print()
        print("  ====================================")
        print("         S L I D E   N U M B E R      ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            difficulty = _ask_difficulty(difficulty)
            _launch(choices[choice], difficulty)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    difficulty: Difficulty = typer.Option(
        Difficulty.MEDIUM, "-d", "--difficulty",
        help="Scramble difficulty (easy=20, medium=50, hard=100 moves).",
    ),
) -> None:
    """Slide Number puzzle."""
    if frontend is None:
        _menu_loop(difficulty)
        return

    _launch(frontend, difficulty)


if __name__ == "__main__":
    app()
