"""PyQt6 GUI frontend — fully self-contained.

Tile buttons slide on click, arrow keys / WASD slide the tile next to the
blank, and difficulty buttons start a fresh board.  A solved board is
reshuffled by a single-shot timer that any manual reset stops.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import PuzzleEngine
from backend.models.board import Direction
from backend.models.difficulty import Difficulty
from frontend.scheduler import AUTO_RESET_DELAY

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PEACH = "#fab387"
_PEACH_H = "#fcc7a5"
_RED = "#f38ba8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_KEY_DIRS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}

_KEY_DIFFICULTY = {
    Qt.Key.Key_1: Difficulty.EASY,
    Qt.Key.Key_2: Difficulty.MEDIUM,
    Qt.Key.Key_3: Difficulty.HARD,
}


def _btn_css(bg: str, hover: str, fg: str, radius: int = 8) -> str:
    return (
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; font-weight:bold; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 13,
    min_w: int = 0,
    min_h: int = 40,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(_btn_css(bg, hover, fg))
    return btn


class _MainWindow(QMainWindow):
    def __init__(self, difficulty: Difficulty) -> None:
        super().__init__()
        self.engine = PuzzleEngine(difficulty)

        self.setWindowTitle("Slide Number")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(460, 620)

        page = QWidget()
        page.setObjectName("page")
        self.setCentralWidget(page)

        root = QVBoxLayout(page)
        root.setSpacing(8)
        root.setContentsMargins(20, 16, 20, 16)

        title = QLabel("New Game")
        title.setFont(QFont("Helvetica", 28, QFont.Weight.Bold))
        title.setStyleSheet(f"color:{_GREEN};")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        # difficulty picker
        hbox = QHBoxLayout()
        hbox.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hbox.setSpacing(10)
        self._diff_btns: dict[Difficulty, QPushButton] = {}
        for d in Difficulty:
            btn = _styled_btn(f"{d.value.title()} ({d.steps})", min_w=110)
            btn.clicked.connect(lambda _, dd=d: self.new_game(dd))
            hbox.addWidget(btn)
            self._diff_btns[d] = btn
        root.addLayout(hbox)

        root.addSpacerItem(QSpacerItem(0, 8))

        # board
        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:12px;")
        grid = QGridLayout(frame)
        grid.setSpacing(8)
        grid.setContentsMargins(10, 10, 10, 10)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        size = self.engine.size
        tile_px = max(48, 360 // size)
        self._tiles: list[QPushButton] = []
        for i in range(size * size):
            b = QPushButton()
            b.setFixedSize(tile_px, tile_px)
            b.setFont(QFont("Helvetica", max(14, tile_px // 3), QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, idx=i: self._click(idx))
            r, c = divmod(i, size)
            grid.addWidget(b, r, c)
            self._tiles.append(b)

        self._moves = QLabel()
        self._moves.setFont(QFont("Helvetica", 20, QFont.Weight.Bold))
        self._moves.setStyleSheet(f"color:{_BLUE};")
        self._moves.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._moves)

        self._status = QLabel()
        self._status.setFont(QFont("Helvetica", 12))
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status)

        self._new_btn = _styled_btn(
            "NEW GAME", bg=_BLUE, hover=_LAVENDER, fg=_BASE, min_w=220, min_h=46
        )
        self._new_btn.clicked.connect(lambda: self.new_game())
        root.addWidget(self._new_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._auto_reset = QTimer(self)
        self._auto_reset.setSingleShot(True)
        self._auto_reset.setInterval(int(AUTO_RESET_DELAY * 1000))
        self._auto_reset.timeout.connect(self._on_auto_reset)

        self._schedule_if_won()
        self._sync()

    # -- engine glue ---

    def _click(self, index: int) -> None:
        self._after(self.engine.apply_move(index).accepted)

    def move(self, direction: Direction) -> None:
        self._after(self.engine.move(direction).accepted)

    def _after(self, accepted: bool) -> None:
        if not accepted:
            return
        self._schedule_if_won()
        self._sync()

    def new_game(self, difficulty: Difficulty | None = None) -> None:
        self._auto_reset.stop()
        self.engine.reset(difficulty)
        self._schedule_if_won()
        self._sync()

    def _on_auto_reset(self) -> None:
        self.engine.reset()
        # a scramble can land back on the goal state
        self._schedule_if_won()
        self._sync()

    def _schedule_if_won(self) -> None:
        if self.engine.won and not self._auto_reset.isActive():
            self._auto_reset.start()

    # -- rendering ---

    def _sync(self) -> None:
        board = self.engine.board
        for i, b in enumerate(self._tiles):
            v = board.get_tile(i)
            if v == 0:
                b.setText("")
                b.setStyleSheet(
                    f"QPushButton{{background:{_MANTLE};border:none;border-radius:10px;}}"
                )
            elif board.is_tile_correct(i):
                b.setText(str(v))
                b.setStyleSheet(_btn_css(_GREEN, _GREEN_H, _BASE, radius=10))
            else:
                b.setText(str(v))
                b.setStyleSheet(_btn_css(_PEACH, _PEACH_H, _BASE, radius=10))

        for d, btn in self._diff_btns.items():
            if d is self.engine.difficulty:
                btn.setStyleSheet(_btn_css(_GREEN, _GREEN_H, _BASE))
            else:
                btn.setStyleSheet(_btn_css(_SURFACE0, _SURFACE1, _TEXT))

        self._moves.setText(f"Moves: {self.engine.moves}")
        if self.engine.won:
            self._status.setText("You Won!!!   A new board is on its way")
            self._status.setStyleSheet(f"color:{_RED};font-weight:bold;")
        else:
            self._status.setText(
                "Click tiles   Arrows / WASD  move   1-3  difficulty   R  new   Esc  quit"
            )
            self._status.setStyleSheet(f"color:{_OVERLAY0};")

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key in _KEY_DIRS:
            self.move(_KEY_DIRS[key])
        elif key in _KEY_DIFFICULTY:
            self.new_game(_KEY_DIFFICULTY[key])
        elif key == Qt.Key.Key_R:
            self.new_game()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(difficulty: Difficulty = Difficulty.MEDIUM) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(difficulty)
    window.show()
    qapp.exec()
