"""Pygame GUI frontend — fully self-contained.

Click a tile to slide it, drag a tile to swipe it in a direction, or use
the arrow keys.  Difficulty buttons start a new board; a solved board is
reshuffled automatically after a short delay.
"""

from __future__ import annotations

import math

import pygame

from backend.engine.gameplay import MoveResult, PuzzleEngine
from backend.models.board import Direction
from backend.models.difficulty import Difficulty
from frontend.scheduler import DelayedReset
from frontend.tiles import TileTokens

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_PEACH = (250, 179, 135)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 460, 640
TILE_GAP = 8
MARGIN = 24
BOARD_TOP = 150
BOARD_PX = WIN_W - 2 * MARGIN

SLIDE_MS = 120  # tile slide animation length
DRAG_THRESHOLD = 12  # px; shorter drags count as taps

_KEY_DIRS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, difficulty: Difficulty) -> None:
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Slide Number")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 34, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 15, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._engine = PuzzleEngine(difficulty)
        self._tokens = TileTokens(len(self._engine.tiles))
        self._auto_reset = DelayedReset()
        # token -> (from_index, to_index, start_ms)
        self._slides: dict[str, tuple[int, int, int]] = {}
        self._press: tuple[tuple[int, int], int] | None = None

        tpx = self._tile_px()
        self._f_tile = pygame.font.SysFont("Helvetica", max(16, tpx // 2), bold=True)
        self._build_btns()
        self._schedule_if_won()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_btns(self) -> None:
        bw, bh, gap = 124, 40, 10
        sx = _cx(3 * bw + 2 * gap)
        self._diff_btns: dict[Difficulty, _Btn] = {}
        for i, d in enumerate(Difficulty):
            self._diff_btns[d] = _Btn(
                (sx + i * (bw + gap), 70, bw, bh),
                f"{d.value.upper()} ({d.steps})",
                self._f_btn,
            )
        self._new_btn = _Btn(
            (_cx(200), WIN_H - 64, 200, 44),
            "NEW GAME",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._all_btns = [*self._diff_btns.values(), self._new_btn]

    # ── geometry ────────────────────────────────────────────────────────────

    def _tile_px(self) -> int:
        sz = self._engine.size
        return (BOARD_PX - (sz + 1) * TILE_GAP) // sz

    def _cell_rect(self, index: int) -> pygame.Rect:
        tpx = self._tile_px()
        r, c = self._engine.board.position(index)
        return pygame.Rect(
            MARGIN + TILE_GAP + c * (tpx + TILE_GAP),
            BOARD_TOP + TILE_GAP + r * (tpx + TILE_GAP),
            tpx,
            tpx,
        )

    def _cell_at(self, pos: tuple[int, int]) -> int | None:
        for i in range(len(self._engine.tiles)):
            if self._cell_rect(i).collidepoint(pos):
                return i
        return None

    # ── engine glue ─────────────────────────────────────────────────────────

    def _after_move(self, before: tuple[int, ...], result: MoveResult) -> None:
        if not result.accepted:
            return
        now = pygame.time.get_ticks()
        self._tokens.follow(before, result.tiles)
        moved = next(
            i for i, (a, b) in enumerate(zip(before, result.tiles)) if a != b and b != 0
        )
        self._slides[self._tokens[moved]] = (before.index(result.tiles[moved]), moved, now)
        self._schedule_if_won()

    def _tap(self, index: int) -> None:
        before = self._engine.tiles
        self._after_move(before, self._engine.apply_move(index))

    def _swipe(self, index: int, dx: int, dy: int) -> None:
        direction = PuzzleEngine.translate_gesture(dx, dy)
        before = self._engine.tiles
        self._after_move(before, self._engine.apply_directional_move(index, direction))

    def _key_move(self, direction: Direction) -> None:
        before = self._engine.tiles
        self._after_move(before, self._engine.move(direction))

    def _new_game(self, difficulty: Difficulty | None = None) -> None:
        self._auto_reset.cancel()
        self._engine.reset(difficulty)
        self._tokens.reassign(len(self._engine.tiles))
        self._slides.clear()
        # a scramble can land back on the goal state
        self._schedule_if_won()

    def _schedule_if_won(self) -> None:
        if self._engine.won:
            self._auto_reset.arm(pygame.time.get_ticks() / 1000)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        engine = self._engine
        now = pygame.time.get_ticks()

        _blit_center(
            self._surf, self._f_big.render("SLIDE  NUMBER", True, COL_TEXT), 18
        )

        for d, btn in self._diff_btns.items():
            selected = d is engine.difficulty
            btn.bg = COL_GREEN if selected else COL_SURFACE0
            btn.fg = COL_BASE if selected else COL_TEXT
            btn.draw(self._surf)

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(MARGIN, BOARD_TOP, BOARD_PX, BOARD_PX),
            border_radius=12,
        )

        tiles = engine.tiles
        for i, val in enumerate(tiles):
            if val == 0:
                continue
            rect = self._cell_rect(i)
            slide = self._slides.get(self._tokens[i])
            if slide is not None:
                src, dst, start = slide
                t = (now - start) / SLIDE_MS
                if t >= 1 or dst != i:
                    del self._slides[self._tokens[i]]
                else:
                    a, b = self._cell_rect(src), rect
                    rect = rect.move(
                        round((a.x - b.x) * (1 - t)), round((a.y - b.y) * (1 - t))
                    )
            col = COL_GREEN if engine.board.is_tile_correct(i) else COL_PEACH
            pygame.draw.rect(self._surf, col, rect, border_radius=10)
            lbl = self._f_tile.render(str(val), True, COL_BASE)
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )

        info_y = BOARD_TOP + BOARD_PX + 14
        _blit_center(
            self._surf,
            self._f_title.render(f"Moves: {engine.moves}", True, COL_BLUE),
            info_y,
        )
        if engine.won:
            left = self._auto_reset.remaining(now / 1000)
            _blit_center(
                self._surf,
                self._f_title.render(
                    f"You Won!   New board in {math.ceil(left)}s", True, COL_PINK
                ),
                info_y + 32,
            )
        else:
            _blit_center(
                self._surf,
                self._f_small.render(
                    "Click / drag tiles     Arrows  move     R  new     Esc  quit",
                    True,
                    COL_OVERLAY0,
                ),
                info_y + 38,
            )

        self._new_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._all_btns:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for d, b in self._diff_btns.items():
                if b.hit(ev.pos):
                    self._new_game(d)
                    return True
            if self._new_btn.hit(ev.pos):
                self._new_game()
                return True
            cell = self._cell_at(ev.pos)
            if cell is not None:
                self._press = (ev.pos, cell)
        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1:
            if self._press is None:
                return True
            (x0, y0), cell = self._press
            self._press = None
            dx, dy = ev.pos[0] - x0, ev.pos[1] - y0
            if math.hypot(dx, dy) < DRAG_THRESHOLD:
                self._tap(cell)
            else:
                self._swipe(cell, dx, dy)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _KEY_DIRS:
                self._key_move(_KEY_DIRS[ev.key])
            elif ev.key == pygame.K_r:
                self._new_game()
            elif ev.key in (pygame.K_1, pygame.K_2, pygame.K_3):
                self._new_game(list(Difficulty)[ev.key - pygame.K_1])
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            if self._auto_reset.due(pygame.time.get_ticks() / 1000):
                self._new_game()

            self._draw()
            pygame.display.flip()
            self._clock.tick(60)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(difficulty: Difficulty = Difficulty.MEDIUM) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(difficulty)
    app.run_loop()
