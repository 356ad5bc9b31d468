"""
view.py — View layer.

Two parts:
  - draw_screen(canvas, session, layout): paints the phone LCD (board,
    snake, food, speed, overlays) on a Canvas.  Reads state, never
    mutates it.
  - GameView: the pygame window around it — phone body (artwork or a
    drawn stand-in), keypad faces, restart button and the HUD strip.

A Canvas is anything with fill_rect / text / measure; PygameCanvas wraps a
pygame.Surface, tests use a recording fake.

Public API:
    GameView(window, phone_image=None)  — bind to the display surface
    view.render(session, layout)        — draw the current frame
"""

import logging
import os

import pygame

from .config import (
    HUD_H, BG, COLOR_LCD, COLOR_SNAKE, COLOR_FOOD, COLOR_TEXT, COLOR_DIM,
    COLOR_SPEED, COLOR_SEL, INSET_COL, OVERLAY_OVER, OVERLAY_MENU,
    OVERLAY_INSTR, PHONE_BODY, PHONE_EDGE, PHONE_BEZEL, KEY_FACE,
    KEY_LABEL, UI_COL, ACCENT, BOARD_INSET, FONT_NAME,
    FOOD_DRAW_SCALE, HEAD_DRAW_SCALE, BODY_DRAW_SCALE,
    MENU_ITEMS, INSTRUCTIONS, TITLE,
    STATE_PLAYING, SCREEN_MENU, SCREEN_INSTRUCTIONS,
)
from .layout import Layout, font_scale, px, menu_metrics, round_half_up
from .session import Session

log = logging.getLogger(__name__)


# ──────────────────────────── Canvas ─────────────────────────────
class PygameCanvas:
    """Canvas over a pygame surface; colours may carry an alpha channel."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            try:
                self._fonts[key] = pygame.font.SysFont(FONT_NAME, size, bold=bold)
            except (pygame.error, OSError) as exc:
                log.warning("System font unavailable (%s), using default", exc)
                self._fonts[key] = pygame.font.Font(None, size)
        return self._fonts[key]

    def fill_rect(self, color: tuple, rect: tuple) -> None:
        if len(color) == 4 and color[3] < 255:
            x, y, w, h = rect
            if w <= 0 or h <= 0:
                return
            patch = pygame.Surface((w, h), pygame.SRCALPHA)
            patch.fill(color)
            self.surface.blit(patch, (x, y))
        else:
            self.surface.fill(color[:3], rect)

    def measure(self, text: str, size: int, bold: bool = False) -> int:
        return self.font(size, bold).size(text)[0]

    def text(self, text: str, pos: tuple, size: int, color: tuple,
             bold: bool = False, align: str = "left", baseline: str = "top") -> None:
        surf = self.font(size, bold).render(text, True, color[:3])
        if len(color) == 4:
            surf.set_alpha(color[3])
        x, y = pos
        if align == "center":
            x -= surf.get_width() // 2
        elif align == "right":
            x -= surf.get_width()
        if baseline == "middle":
            y -= surf.get_height() // 2
        self.surface.blit(surf, (int(x), int(y)))


# ───────────────────────── Text helpers ──────────────────────────
def wrap_text(text: str, max_width: int, measure) -> list[str]:
    """
    Greedy word wrap.  `measure(s)` returns the width of s.  A word wider
    than max_width still gets a line of its own.
    """
    lines: list[str] = []
    line = ""
    for word in str(text).split():
        candidate = f"{line} {word}" if line else word
        if not line or measure(candidate) <= max_width:
            line = candidate
            continue
        lines.append(line)
        line = word
    if line:
        lines.append(line)
    return lines


# ─────────────────────────── LCD frame ───────────────────────────
def draw_screen(canvas, session: Session, layout: Layout) -> None:
    """Paint one frame of the phone screen in screen-local pixels."""
    w, h = layout.screen.size
    board = layout.board
    model = session.model

    canvas.fill_rect(COLOR_LCD, (0, 0, w, h))
    canvas.fill_rect(INSET_COL, (board.off_x - BOARD_INSET, board.off_y - BOARD_INSET,
                                 board.w + BOARD_INSET * 2, board.h + BOARD_INSET * 2))

    canvas.fill_rect(COLOR_FOOD, board.cell_rect(*model.food, FOOD_DRAW_SCALE))
    for i, (x, y) in enumerate(model.snake):
        scale = HEAD_DRAW_SCALE if i == 0 else BODY_DRAW_SCALE
        canvas.fill_rect(COLOR_SNAKE, board.cell_rect(x, y, scale))

    fs = font_scale(layout)
    if session.state == STATE_PLAYING:
        canvas.text(f"SPEED: {model.speed_level}", (w - 10, 8), px(10, fs),
                    COLOR_SPEED, align="right")

    if session.screen == SCREEN_MENU:
        _draw_menu(canvas, session, layout, fs)
        return
    if session.screen == SCREEN_INSTRUCTIONS:
        _draw_instructions(canvas, layout, fs)
        return
    if model.game_over:
        _draw_game_over(canvas, session, layout, fs)


def _draw_game_over(canvas, session: Session, layout: Layout, fs: float) -> None:
    w, h = layout.screen.size
    canvas.fill_rect(OVERLAY_OVER, (0, 0, w, h))
    cx, cy = w // 2, h // 2
    canvas.text("GAME OVER", (cx, cy - 16), px(22, fs), COLOR_TEXT,
                bold=True, align="center", baseline="middle")
    canvas.text(f"Final score: {session.model.score}", (cx, cy + 18), px(13, fs),
                COLOR_TEXT, bold=True, align="center", baseline="middle")
    canvas.text("Press R or tap Restart", (cx, cy + 44), px(10, fs),
                COLOR_TEXT, align="center", baseline="middle")


def _draw_menu(canvas, session: Session, layout: Layout, fs: float) -> None:
    w, h = layout.screen.size
    canvas.fill_rect(OVERLAY_MENU, (0, 0, w, h))

    title_y, start_y, row_h = menu_metrics(fs)
    canvas.text(TITLE, (w // 2, title_y), px(16, fs), COLOR_TEXT,
                bold=True, align="center")

    for i, label in enumerate(MENU_ITEMS):
        y = start_y + i * row_h
        if i == session.menu_index:
            canvas.fill_rect(COLOR_SEL, (16, y - 4, w - 32, row_h))
        color = COLOR_TEXT if session.menu_item_enabled(i) else COLOR_DIM
        canvas.text(label, (22, y), px(18, fs), color, bold=True)


def _draw_instructions(canvas, layout: Layout, fs: float) -> None:
    w, h = layout.screen.size
    canvas.fill_rect(OVERLAY_INSTR, (0, 0, w, h))
    canvas.text("Instructions", (16, round_half_up(10 * fs)), px(16, fs), COLOR_TEXT, bold=True)

    size = px(11, fs)
    line_h = max(12, round_half_up(15 * fs))
    max_w = max(1, w - 32)
    y = round_half_up(38 * fs)
    for entry in INSTRUCTIONS:
        for line in wrap_text(entry, max_w, lambda s: canvas.measure(s, size)):
            canvas.text(line, (16, y), size, COLOR_TEXT)
            y += line_h


# ─────────────────────────── GameView ────────────────────────────
def load_phone_image(path: str) -> pygame.Surface | None:
    """Load the phone artwork. Returns None (drawn stand-in) on any failure."""
    if not path:
        return None
    if not os.path.isfile(path):
        log.warning("Phone image not found at '%s', drawing the phone instead", path)
        return None
    try:
        return pygame.image.load(path).convert_alpha()
    except pygame.error as exc:
        log.warning("Could not load phone image '%s': %s", path, exc)
        return None


class GameView:
    """Renders the complete window from a Session and the current Layout."""

    def __init__(self, window: pygame.Surface, phone_image: pygame.Surface = None):
        self.window = window
        self.chrome = PygameCanvas(window)
        self._phone_image = phone_image
        self._phone_scaled: pygame.Surface | None = None
        self._lcd: PygameCanvas | None = None

    def set_window(self, window: pygame.Surface) -> None:
        self.window = window
        self.chrome = PygameCanvas(window)

    # ── Main entry ───────────────────────────────────────────────
    def render(self, session: Session, layout: Layout) -> None:
        self.window.fill(BG)
        self._draw_phone(layout)

        lcd = self._lcd_canvas(layout.screen.size)
        draw_screen(lcd, session, layout)
        self.window.blit(lcd.surface, layout.screen.topleft)

        if session.restart_visible:
            self._draw_restart(layout)
        self._draw_hud(session)
        pygame.display.flip()

    def _lcd_canvas(self, size: tuple[int, int]) -> PygameCanvas:
        if self._lcd is None or self._lcd.size != size:
            self._lcd = PygameCanvas(pygame.Surface((max(1, size[0]), max(1, size[1]))))
        return self._lcd

    # ── Phone chrome ─────────────────────────────────────────────
    def _draw_phone(self, layout: Layout) -> None:
        if self._phone_image is not None:
            if self._phone_scaled is None or self._phone_scaled.get_size() != layout.phone.size:
                self._phone_scaled = pygame.transform.smoothscale(self._phone_image, layout.phone.size)
            self.window.blit(self._phone_scaled, layout.phone.topleft)
            return

        s = layout.scale
        ox, oy = layout.phone.topleft
        body = pygame.Rect(ox + round_half_up(470 * s), oy + round_half_up(110 * s),
                           round_half_up(660 * s), round_half_up(1450 * s))
        pygame.draw.rect(self.window, PHONE_BODY, body, border_radius=round_half_up(220 * s))
        pygame.draw.rect(self.window, PHONE_EDGE, body, max(1, round_half_up(8 * s)),
                         border_radius=round_half_up(220 * s))
        bezel = layout.screen.inflate(round_half_up(60 * s), round_half_up(60 * s))
        pygame.draw.rect(self.window, PHONE_BEZEL, bezel, border_radius=round_half_up(40 * s))

        label_size = max(14, round_half_up(min(layout.keys["2"].size) * 0.22))
        for label, rect in layout.keys.items():
            pygame.draw.rect(self.window, KEY_FACE, rect,
                             border_radius=layout.key_radius(label))
            self.chrome.text(label, rect.center, label_size, KEY_LABEL,
                             bold=True, align="center", baseline="middle")

    def _draw_restart(self, layout: Layout) -> None:
        rect = layout.restart
        pygame.draw.rect(self.window, PHONE_EDGE, rect, border_radius=6)
        pygame.draw.rect(self.window, ACCENT, rect, 2, border_radius=6)
        self.chrome.text("Restart", rect.center, 16, ACCENT,
                         bold=True, align="center", baseline="middle")

    def _draw_hud(self, session: Session) -> None:
        score, best, attempts = session.hud()
        width = self.window.get_width()
        pygame.draw.rect(self.window, PHONE_EDGE, (0, 0, width, HUD_H))
        cells = [("SCORE", score), ("BEST", best), ("TODAY", attempts)]
        slot = width // len(cells)
        for i, (label, value) in enumerate(cells):
            cx = slot * i + slot // 2
            self.chrome.text(label, (cx, 8), 12, UI_COL, align="center")
            self.chrome.text(str(value), (cx, 24), 22, ACCENT, bold=True, align="center")
