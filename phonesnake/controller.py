"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame window, clock and event loop.
  - Translate raw keyboard / mouse events into intents for inputs.py.
  - Recompute the layout whenever the window size changes.
  - Drive the fixed-step simulation and ask the view to render.
  - Keep the game alive: a fault inside a frame is logged and the
    session drops back to the idle menu.

The controller is the only layer that reads pygame events.
"""

import logging
import sys

import pygame

from .config import WIDTH, HEIGHT, FPS, HUD_H, TITLE, PHONE_IMAGE
from . import inputs
from .layout import Layout, compute_layout, fit_phone
from .session import Session
from .view import GameView, load_phone_image

log = logging.getLogger(__name__)

KEY_INTENTS = {
    pygame.K_UP:        inputs.UP,
    pygame.K_DOWN:      inputs.DOWN,
    pygame.K_LEFT:      inputs.LEFT,
    pygame.K_RIGHT:     inputs.RIGHT,
    pygame.K_w:         inputs.UP,
    pygame.K_s:         inputs.DOWN,
    pygame.K_a:         inputs.LEFT,
    pygame.K_d:         inputs.RIGHT,
    pygame.K_p:         inputs.PAUSE,
    pygame.K_RETURN:    inputs.CONFIRM,
    pygame.K_KP_ENTER:  inputs.CONFIRM,
    pygame.K_SPACE:     inputs.CONFIRM,
    pygame.K_ESCAPE:    inputs.BACK,
    pygame.K_BACKSPACE: inputs.BACK,
    pygame.K_r:         inputs.RESTART,
}


class GameController:
    """
    Owns the main loop.
    Glues Session <-> View without them knowing about each other.
    """

    def __init__(self, session: Session = None):
        pygame.init()
        self.window = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock   = pygame.time.Clock()
        self.session = session if session is not None else Session()
        self.view    = GameView(self.window, load_phone_image(PHONE_IMAGE))
        self.layout: Layout = self._relayout()

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        log.info("Starting %s", TITLE)
        while True:
            self._safe_frame(self.clock.tick(FPS))

    def _safe_frame(self, elapsed_ms: float) -> None:
        try:
            self.frame(elapsed_ms)
        except Exception:
            log.exception("Frame failed, returning to menu")
            self.session.recover()

    def frame(self, elapsed_ms: float) -> None:
        self._handle_events()
        self.session.advance(elapsed_ms)
        self.view.render(self.session, self.layout)

    # ── Layout ────────────────────────────────────────────────────
    def _relayout(self) -> Layout:
        w, h = self.window.get_size()
        rendered, origin = fit_phone(w, h, HUD_H)
        self.layout = compute_layout(rendered, origin)
        log.debug("Layout: phone %dpx, screen %s, %r",
                  rendered, self.layout.screen, self.layout.board)
        return self.layout

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.VIDEORESIZE:
                self.window = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                self.view.set_window(self.window)
                self._relayout()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                inputs.pointer_down(self.session, self.layout, event.pos)

    def _handle_keydown(self, key: int) -> None:
        # Q quits from any state
        if key == pygame.K_q:
            self._quit()
        intent = KEY_INTENTS.get(key)
        if intent is not None:
            inputs.dispatch(self.session, intent)

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        log.info("Quitting")
        pygame.quit()
        sys.exit()
