"""
config.py — Shared constants for the entire application.
No logic beyond reading a few environment overrides, no imports from
internal modules.
"""

import os

# ── Window ────────────────────────────────────────────────────────
WIDTH, HEIGHT   = 760, 820
HUD_H           = 56
FPS             = 60
TITLE           = "Snake II"

# ── Design space (phone image is DESIGN_SIZE x DESIGN_SIZE) ───────
DESIGN_SIZE     = 1600

# Phone screen rectangle, design px
SCREEN_LEFT     = 580
SCREEN_TOP      = 308
SCREEN_WIDTH    = 450
SCREEN_HEIGHT   = 390

# Gap between the screen edge and the board, rendered px
BOARD_MARGIN_PX = 14

# Keypad tap targets, design px: centre x, centre y, width, height
KEY_SIZE        = 150
KEY_WIDE        = 195
KEYS = {
    "2": (800,  1135, KEY_SIZE, KEY_SIZE),
    "4": (610,  1225, KEY_WIDE, KEY_SIZE),
    "6": (990,  1225, KEY_WIDE, KEY_SIZE),
    "*": (610,  1465, KEY_WIDE, KEY_SIZE),
    "8": (800,  1350, KEY_SIZE, KEY_SIZE),
}

# Restart button below the screen, rendered px
RESTART_W       = 120
RESTART_H       = 34
RESTART_GAP     = 22     # design px, scaled

# ── Grid ──────────────────────────────────────────────────────────
GRID_COLS       = 20
GRID_ROWS       = 16
MIN_CELL_PX     = 8

FOOD_DRAW_SCALE = 0.7
HEAD_DRAW_SCALE = 0.95
BODY_DRAW_SCALE = 0.85
# Half a food square of padding around the board on every side
HALF_FOOD_PAD_CELLS = FOOD_DRAW_SCALE / 2
BOARD_INSET     = 6

# ── Text ──────────────────────────────────────────────────────────
FONT_NAME       = "couriernew,courier,monospace"
FONT_DAMPEN     = 0.88
FONT_SCALE_MIN  = 0.62
FONT_SCALE_MAX  = 0.9
FONT_MIN_PX     = 9

# ── Colors ────────────────────────────────────────────────────────
BG          = (22,  24,  28)
COLOR_LCD   = (11,  18,  12)
COLOR_SNAKE = (124, 255, 157)
COLOR_FOOD  = (214, 255, 217)
COLOR_TEXT  = (214, 255, 217, 242)
COLOR_DIM   = (214, 255, 217, 89)
COLOR_SPEED = (214, 255, 217, 178)
COLOR_SEL   = (214, 255, 217, 56)
INSET_COL   = (0,   0,   0,   46)
OVERLAY_OVER  = (0, 0, 0, 166)
OVERLAY_MENU  = (0, 0, 0, 140)
OVERLAY_INSTR = (0, 0, 0, 166)

PHONE_BODY  = (38,  52,  88)
PHONE_EDGE  = (20,  28,  50)
PHONE_BEZEL = (150, 160, 170)
KEY_FACE    = (60,  74,  112)
KEY_LABEL   = (220, 226, 240)
UI_COL      = (170, 176, 200)
ACCENT      = (255, 228, 77)

# ── Gameplay ──────────────────────────────────────────────────────
START_LENGTH        = 3
FOOD_SPAWN_ATTEMPTS = 5000
FOOD_FALLBACK       = (0, 0)

POINTS_PER_LEVEL    = 5
MAX_SPEED_LEVEL     = 10
BASE_TICK_MS        = 220
TICK_STEP_MS        = 15
MIN_TICK_MS         = 80

# ── Game States ───────────────────────────────────────────────────
STATE_IDLE    = "idle"
STATE_PLAYING = "playing"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"

# ── UI Screens ────────────────────────────────────────────────────
SCREEN_MENU         = "menu"
SCREEN_INSTRUCTIONS = "instructions"
SCREEN_NONE         = "none"

MENU_INSTRUCTIONS = 0
MENU_CONTINUE     = 1
MENU_NEW_GAME     = 2
MENU_ITEMS        = ("Instructions", "Continue", "New game")

INSTRUCTIONS = (
    "- Arrow keys to move",
    "- Tap 2/4/6/8 on keypad",
    "- P or * to pause",
    "- Eat food to score",
    "- Don't hit yourself",
    "- Press Enter to go back",
)

# ── Stats persistence ─────────────────────────────────────────────
STATS_KEY   = "redpepe.snake.stats.v1"
STATS_PATH  = os.environ.get(
    "PHONESNAKE_STATS_PATH",
    os.path.join(os.path.expanduser("~"), ".phonesnake", "stats.json"),
)

# ── Assets & diagnostics ──────────────────────────────────────────
# Optional 1600x1600 phone artwork; a drawn stand-in is used when unset
PHONE_IMAGE = os.environ.get("PHONESNAKE_PHONE_IMAGE", "")
LOG_LEVEL   = os.environ.get("PHONESNAKE_LOG_LEVEL", "INFO")
LOG_FORMAT  = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
