"""
layout.py — Geometry engine.

Maps the fixed 1600x1600 design space (phone artwork, screen rectangle,
keypad buttons) onto the size the phone is actually drawn at, and fits
the game board inside the phone screen.

Everything here is a pure function of the rendered phone width and the
constants in config.py.  The controller keeps the last result around for
hit-testing only.

Public API:
    fit_phone(window_w, window_h, hud_h)  -> (rendered_width, origin)
    compute_layout(rendered_width, origin) -> Layout
    key_at(layout, pos)                    -> key label or None
    font_scale(layout) / px(base, fs)      — text sizing
    menu_metrics(fs) / menu_row_at(...)    — menu row geometry
"""

import math

import pygame

from .config import (
    DESIGN_SIZE,
    SCREEN_LEFT, SCREEN_TOP, SCREEN_WIDTH, SCREEN_HEIGHT,
    BOARD_MARGIN_PX, KEYS, KEY_SIZE,
    RESTART_W, RESTART_H, RESTART_GAP,
    GRID_COLS, GRID_ROWS, MIN_CELL_PX, HALF_FOOD_PAD_CELLS,
    FONT_DAMPEN, FONT_SCALE_MIN, FONT_SCALE_MAX, FONT_MIN_PX,
    MENU_ITEMS,
)


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded up (round() would go to even)."""
    return math.floor(value + 0.5)


# ──────────────────────────── Board ──────────────────────────────
class Board:
    """Cell size and pixel offsets of the grid, local to the screen rect."""

    def __init__(self, cell: int, off_x: int, off_y: int):
        self.cell = cell
        self.off_x = off_x
        self.off_y = off_y
        self.w = cell * GRID_COLS
        self.h = cell * GRID_ROWS

    def cell_rect(self, x: int, y: int, scale: float = 1.0) -> tuple[int, int, int, int]:
        """Rectangle for grid cell (x, y) shrunk to `scale`, centred in the cell."""
        s = self.cell
        pad = math.floor((1 - scale) * s / 2)
        return (self.off_x + x * s + pad, self.off_y + y * s + pad,
                s - pad * 2, s - pad * 2)

    def __repr__(self):
        return f"Board(cell={self.cell}, off=({self.off_x}, {self.off_y}))"


# ──────────────────────────── Layout ─────────────────────────────
class Layout:
    """Result of one layout pass. Screen and keys are in window pixels."""

    def __init__(
        self,
        scale: float,
        phone: pygame.Rect,
        screen: pygame.Rect,
        board: Board,
        keys: dict[str, pygame.Rect],
        restart: pygame.Rect,
    ):
        self.scale = scale
        self.phone = phone
        self.screen = screen
        self.board = board
        self.keys = keys
        self.restart = restart

    def key_radius(self, label: str) -> int:
        rect = self.keys[label]
        return round_half_up(min(rect.w, rect.h) * 0.22)


def fit_phone(window_w: int, window_h: int, hud_h: int = 0) -> tuple[int, tuple[int, int]]:
    """
    Largest square phone that fits below the HUD strip, centred.
    Returns (rendered_width, (origin_x, origin_y)).
    """
    avail_h = max(1, window_h - hud_h)
    side = max(1, min(window_w, avail_h))
    return side, ((window_w - side) // 2, hud_h + (avail_h - side) // 2)


def _scaled_key(key: tuple, scale: float, ox: int, oy: int) -> pygame.Rect:
    cx, cy, w, h = key
    w = w or KEY_SIZE
    h = h or KEY_SIZE
    return pygame.Rect(
        ox + round_half_up((cx - w / 2) * scale),
        oy + round_half_up((cy - h / 2) * scale),
        round_half_up(w * scale),
        round_half_up(h * scale),
    )


def fit_board(screen_w: int, screen_h: int) -> Board:
    """Fit GRID_COLS x GRID_ROWS cells inside a screen of the given size."""
    avail_w = max(1, screen_w - BOARD_MARGIN_PX * 2)
    avail_h = max(1, screen_h - BOARD_MARGIN_PX * 2)

    cell_x = math.floor(avail_w / (GRID_COLS + HALF_FOOD_PAD_CELLS * 2))
    cell_y = math.floor(avail_h / (GRID_ROWS + HALF_FOOD_PAD_CELLS * 2))
    cell = max(MIN_CELL_PX, min(cell_x, cell_y))

    pad = max(0, math.ceil(cell * HALF_FOOD_PAD_CELLS))
    inner_w = max(1, avail_w - pad * 2)
    inner_h = max(1, avail_h - pad * 2)

    return Board(
        cell,
        BOARD_MARGIN_PX + pad + (inner_w - cell * GRID_COLS) // 2,
        BOARD_MARGIN_PX + pad + (inner_h - cell * GRID_ROWS) // 2,
    )


def compute_layout(rendered_width: int, origin: tuple[int, int] = (0, 0)) -> Layout:
    scale = rendered_width / DESIGN_SIZE
    ox, oy = origin

    screen = pygame.Rect(
        ox + round_half_up(SCREEN_LEFT * scale),
        oy + round_half_up(SCREEN_TOP * scale),
        round_half_up(SCREEN_WIDTH * scale),
        round_half_up(SCREEN_HEIGHT * scale),
    )
    keys = {label: _scaled_key(key, scale, ox, oy) for label, key in KEYS.items()}
    restart = pygame.Rect(
        screen.left + screen.width // 2 - RESTART_W // 2,
        screen.bottom + round_half_up(RESTART_GAP * scale),
        RESTART_W,
        RESTART_H,
    )
    return Layout(
        scale=scale,
        phone=pygame.Rect(ox, oy, rendered_width, rendered_width),
        screen=screen,
        board=fit_board(screen.width, screen.height),
        keys=keys,
        restart=restart,
    )


def key_at(layout: Layout, pos: tuple[int, int]) -> str | None:
    for label, rect in layout.keys.items():
        if rect.collidepoint(pos):
            return label
    return None


# ───────────────────────── Text sizing ───────────────────────────
def font_scale(layout: Layout) -> float:
    """Text scale from the rendered screen width, dampened and clamped."""
    s = layout.screen.width / SCREEN_WIDTH * FONT_DAMPEN
    return max(FONT_SCALE_MIN, min(FONT_SCALE_MAX, s))


def px(base: int, fs: float) -> int:
    return max(FONT_MIN_PX, math.floor(base * fs))


def menu_metrics(fs: float) -> tuple[int, int, int]:
    """(title_y, start_y, row_h), shared by menu drawing and hit-testing."""
    return round_half_up(10 * fs), round_half_up(40 * fs), max(22, round_half_up(30 * fs))


def menu_row_at(layout: Layout, pos: tuple[int, int]) -> int | None:
    """Menu row under a window-space point, or None."""
    x = pos[0] - layout.screen.left
    y = pos[1] - layout.screen.top
    if not (0 <= x <= layout.screen.width and 0 <= y <= layout.screen.height):
        return None
    _, start_y, row_h = menu_metrics(font_scale(layout))
    idx = math.floor((y - start_y) / row_h)
    if 0 <= idx < len(MENU_ITEMS):
        return idx
    return None
