"""
model.py — Model layer.

Owns the board simulation and its rules. Zero rendering, zero input
handling, no knowledge of menus or persistence.

Classes:
    Direction   — immutable (dx, dy) value object
    GameModel   — snake, direction, food, score; advances one cell per tick()

Functions:
    speed_level(score)      — 1..MAX_SPEED_LEVEL
    tick_interval_ms(score) — milliseconds between ticks at that score
"""

import logging
import random

from .config import (
    GRID_COLS, GRID_ROWS, START_LENGTH,
    FOOD_SPAWN_ATTEMPTS, FOOD_FALLBACK,
    POINTS_PER_LEVEL, MAX_SPEED_LEVEL,
    BASE_TICK_MS, TICK_STEP_MS, MIN_TICK_MS,
)

log = logging.getLogger(__name__)

Cell = tuple[int, int]

# tick() outcomes
TICK_MOVED = "moved"
TICK_ATE   = "ate"
TICK_DIED  = "died"


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def as_tuple(self) -> Cell:
        return (self.x, self.y)

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


# ────────────────────────── Speed model ──────────────────────────
def speed_level(score: int) -> int:
    return min(MAX_SPEED_LEVEL, 1 + score // POINTS_PER_LEVEL)


def tick_interval_ms(score: int) -> int:
    return max(MIN_TICK_MS, BASE_TICK_MS - (speed_level(score) - 1) * TICK_STEP_MS)


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    One game of snake on a wrap-around board.

    The snake is a list of cells, head first.  Each tick replaces it with
    a new list: the new head prepended and the tail dropped unless food
    was eaten.  `rng` is any random.Random; tests seed their own.
    """

    def __init__(self, cols: int = GRID_COLS, rows: int = GRID_ROWS, rng: random.Random = None):
        self.cols = cols
        self.rows = rows
        self.rng = rng or random.Random()
        self.snake: list[Cell] = []
        self.dir: Direction = Direction.RIGHT
        self._next_dir: Direction = Direction.RIGHT
        self.food: Cell = FOOD_FALLBACK
        self.score: int = 0
        self.game_over: bool = False
        self.reset()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def next_dir(self) -> Direction:
        return self._next_dir

    @property
    def speed_level(self) -> int:
        return speed_level(self.score)

    @property
    def tick_interval_ms(self) -> int:
        return tick_interval_ms(self.score)

    # ── Commands ─────────────────────────────────────────────────
    def reset(self) -> None:
        self.score = 0
        self.game_over = False
        self.dir = Direction.RIGHT
        self._next_dir = Direction.RIGHT

        start_x = self.cols // 2 - 1
        start_y = self.rows // 2
        self.snake = [(start_x - i, start_y) for i in range(START_LENGTH)]
        self.food = self.spawn_food()

    def set_direction(self, dx: int, dy: int) -> bool:
        """
        Latch a direction for the next tick.  Ignored (returns False) if
        it would reverse the snake onto itself.
        """
        new_dir = Direction(dx, dy)
        if new_dir.is_opposite(self.dir):
            return False
        self._next_dir = new_dir
        return True

    def spawn_food(self) -> Cell:
        """Random free cell by rejection sampling, FOOD_FALLBACK if none is found."""
        occupied = set(self.snake)
        for _ in range(FOOD_SPAWN_ATTEMPTS):
            pos = (self.rng.randint(0, self.cols - 1), self.rng.randint(0, self.rows - 1))
            if pos not in occupied:
                return pos
        log.warning("No free cell found after %d tries, food placed at %s",
                    FOOD_SPAWN_ATTEMPTS, FOOD_FALLBACK)
        return FOOD_FALLBACK

    def next_head(self, direction: Direction) -> Cell:
        hx, hy = self.head
        return ((hx + direction.x) % self.cols, (hy + direction.y) % self.rows)

    def tick(self) -> str | None:
        """
        Advance one cell.
        Returns TICK_MOVED, TICK_ATE or TICK_DIED; None once the game is over.
        """
        if self.game_over:
            return None

        self.dir = self._next_dir
        head = self.next_head(self.dir)
        ate = head == self.food

        body = [head] + self.snake
        if not ate:
            body.pop()

        if head in body[1:]:
            self.game_over = True
            return TICK_DIED

        self.snake = body
        if ate:
            self.score += 1
            self.food = self.spawn_food()
            return TICK_ATE
        return TICK_MOVED
