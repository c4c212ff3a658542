"""Rich terminal frontend — styled board, move counter and difficulty picker.

Uses the ``rich`` library for output and the shared single-key input
handler.  Arrow keys / WASD slide a tile into the blank.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import PuzzleEngine
from backend.models.board import Board, Direction
from backend.models.difficulty import Difficulty
from frontend.cli.input_handler import get_key, get_key_timeout
from frontend.scheduler import DelayedReset

console = Console()

_DIRECTIONS = {d.value: d for d in Direction}
_DIFFICULTIES = {d.value: d for d in Difficulty}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(board.index_of(r, c)):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def difficulty_bar(selected: Difficulty) -> Text:
    bar = Text()
    for i, d in enumerate(Difficulty, 1):
        if i > 1:
            bar.append("  ")
        label = f" {i} {d.value.title()} ({d.steps}) "
        if d is selected:
            bar.append(label, style="bold green on #313244")
        else:
            bar.append(label, style="dim")
    return bar


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("1-3", style="bold cyan")
    controls.append("  difficulty   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new game   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


# -- screens ------------------------------------------------------------------


def _draw_game(engine: PuzzleEngine, status: str = "") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(engine.moves), style="bold yellow")

    parts = [Align.center(render_board(engine.board)), Text("")]
    if engine.won:
        congrats = Text()
        congrats.append("★ ", style="bold yellow")
        congrats.append("You Won!", style="bold green")
        congrats.append(" ★", style="bold yellow")
        parts.append(Align.center(congrats))
    parts.append(Align.center(stats))

    border = "bold green" if engine.won else "bright_blue"
    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Slide Number  {engine.size}×{engine.size}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(difficulty_bar(engine.difficulty)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_menu(selected: Difficulty) -> None:
    console.clear()

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(difficulty_bar(selected)),
        Align.center(Text("  1 2 3  choose difficulty", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]S L I D E   N U M B E R[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def _play(difficulty: Difficulty) -> None:
    engine = PuzzleEngine(difficulty)
    auto_reset = DelayedReset()
    status = ""

    while True:
        if engine.won:
            auto_reset.arm(time.monotonic())
            left = auto_reset.remaining(time.monotonic())
            status = f"[green]New board in {left:.0f}s, R to reshuffle now[/green]"
        _draw_game(engine, status)
        status = ""

        # Block for input, but wake up while a reshuffle is pending so the
        # countdown gets redrawn.
        while True:
            key = get_key_timeout(0.5)
            if key is not None or auto_reset.pending:
                break

        if key is None:
            if auto_reset.due(time.monotonic()):
                engine.reset()
                status = "[yellow]Reshuffled![/yellow]"
            continue

        if key in _DIRECTIONS:
            engine.move(_DIRECTIONS[key])
        elif key in _DIFFICULTIES:
            auto_reset.cancel()
            engine.reset(_DIFFICULTIES[key])
            status = f"[yellow]{engine.difficulty.value.title()} board[/yellow]"
        elif key == "restart":
            auto_reset.cancel()
            engine.reset()
            status = "[yellow]Reshuffled![/yellow]"
        elif key == "quit":
            return


def _menu_loop(difficulty: Difficulty) -> None:
    selected = difficulty
    while True:
        _draw_menu(selected)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if key in _DIFFICULTIES:
            selected = _DIFFICULTIES[key]
        elif key == "enter":
            _play(selected)


# -- public entry point -------------------------------------------------------


def run(difficulty: Difficulty = Difficulty.MEDIUM, menu: bool = True) -> None:
    """Launch the Rich CLI, either at its menu or straight into a game."""
    if menu:
        _menu_loop(difficulty)
    else:
        _play(difficulty)
