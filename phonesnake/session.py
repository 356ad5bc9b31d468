"""
session.py — Application state and the menu / pause state machine.

One Session owns everything that changes while the program runs:
the GameModel, the top-level game state, the overlay screen, the
highlighted menu row, the stats store and the fixed-step accumulator.
The view reads it, the input dispatcher and the controller mutate it.

Game state transitions are looked up in TRANSITIONS; an action that has
no entry for the current state is ignored.
"""

import logging
import random

from .config import (
    STATE_IDLE, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
    SCREEN_MENU, SCREEN_INSTRUCTIONS, SCREEN_NONE,
    MENU_INSTRUCTIONS, MENU_CONTINUE, MENU_NEW_GAME, MENU_ITEMS,
)
from .model import GameModel, TICK_ATE, TICK_DIED
from .stats import StatsStore

log = logging.getLogger(__name__)

# (state, action) -> (new state, new screen or None to leave it)
TRANSITIONS = {
    (STATE_IDLE,    "start"):  (STATE_PLAYING, SCREEN_NONE),
    (STATE_PLAYING, "start"):  (STATE_PLAYING, SCREEN_NONE),
    (STATE_PAUSED,  "start"):  (STATE_PLAYING, SCREEN_NONE),
    (STATE_OVER,    "start"):  (STATE_PLAYING, SCREEN_NONE),
    (STATE_PLAYING, "pause"):  (STATE_PAUSED,  SCREEN_MENU),
    (STATE_PAUSED,  "resume"): (STATE_PLAYING, SCREEN_NONE),
    (STATE_PLAYING, "die"):    (STATE_OVER,    None),
}


class Session:
    """Top-level application state, driven by the controller."""

    def __init__(self, stats: StatsStore = None, model: GameModel = None,
                 rng: random.Random = None):
        self.stats = stats if stats is not None else StatsStore()
        self.model = model if model is not None else GameModel(rng=rng)
        self.state: str = STATE_IDLE
        self.screen: str = SCREEN_MENU
        self.menu_index: int = MENU_NEW_GAME
        self.restart_visible: bool = False
        self.acc_ms: float = 0.0

    # ── State machine ────────────────────────────────────────────
    def _apply(self, action: str) -> bool:
        target = TRANSITIONS.get((self.state, action))
        if target is None:
            log.debug("Ignoring %r while %s", action, self.state)
            return False
        state, screen = target
        log.debug("%s --%s--> %s", self.state, action, state)
        self.state = state
        if screen is not None:
            self.screen = screen
        return True

    def start_new_game(self) -> None:
        self.model.reset()
        self.restart_visible = False
        self.acc_ms = 0.0
        attempts = self.stats.record_attempt()
        self._apply("start")
        log.info("New game started (attempt %d today)", attempts)

    def pause_game(self) -> bool:
        if not self._apply("pause"):
            return False
        self.menu_index = MENU_CONTINUE
        return True

    def resume_game(self) -> bool:
        return self._apply("resume")

    def toggle_pause(self) -> None:
        if self.state == STATE_PLAYING:
            self.pause_game()
        elif self.state == STATE_PAUSED:
            self.resume_game()

    def select_menu_item(self, index: int) -> None:
        if index == MENU_INSTRUCTIONS:
            self.screen = SCREEN_INSTRUCTIONS
        elif index == MENU_CONTINUE:
            self.resume_game()
        elif index == MENU_NEW_GAME:
            self.start_new_game()

    def dismiss_instructions(self) -> None:
        if self.screen == SCREEN_INSTRUCTIONS:
            self.screen = SCREEN_MENU

    def menu_up(self) -> None:
        self.menu_index = (self.menu_index - 1) % len(MENU_ITEMS)

    def menu_down(self) -> None:
        self.menu_index = (self.menu_index + 1) % len(MENU_ITEMS)

    def menu_item_enabled(self, index: int) -> bool:
        if index == MENU_CONTINUE:
            return self.state == STATE_PAUSED
        return 0 <= index < len(MENU_ITEMS)

    def recover(self) -> None:
        """Drop back to the idle menu after an unexpected fault."""
        self.state = STATE_IDLE
        self.screen = SCREEN_MENU
        self.menu_index = MENU_NEW_GAME
        self.restart_visible = False
        self.acc_ms = 0.0

    # ── Simulation ───────────────────────────────────────────────
    def tick(self) -> str | None:
        """One simulation step; does nothing unless a game is being played."""
        if self.state != STATE_PLAYING:
            return None
        result = self.model.tick()
        if result == TICK_DIED:
            self._apply("die")
            self.restart_visible = True
            log.info("Game over, score %d", self.model.score)
        elif result == TICK_ATE:
            self.stats.record_score(self.model.score)
        return result

    def advance(self, elapsed_ms: float) -> int:
        """
        Feed wall-clock time into the fixed-step accumulator and run as
        many whole ticks as it holds.  Time only accrues while playing;
        a pause keeps whatever partial step was pending.
        Returns the number of ticks run.
        """
        if self.state != STATE_PLAYING:
            return 0
        self.acc_ms += elapsed_ms
        step = self.model.tick_interval_ms
        ticks = 0
        while self.acc_ms >= step and self.state == STATE_PLAYING:
            self.acc_ms -= step
            self.tick()
            ticks += 1
        return ticks

    # ── HUD ──────────────────────────────────────────────────────
    def hud(self) -> tuple[int, int, int]:
        """(score, best score, attempts today)."""
        return self.model.score, self.stats.best_score, self.stats.attempts_today()
