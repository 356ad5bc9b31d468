"""
inputs.py — Input dispatcher.

Turns abstract intents (keyboard) and pointer presses into Session
commands.  Kept free of pygame event objects so it can be driven from
tests; the controller owns the pygame key map.
"""

import logging

from .config import STATE_PLAYING, SCREEN_MENU, SCREEN_INSTRUCTIONS
from .layout import Layout, key_at, menu_row_at
from .model import Direction
from .session import Session

log = logging.getLogger(__name__)

UP      = "up"
DOWN    = "down"
LEFT    = "left"
RIGHT   = "right"
PAUSE   = "pause"
CONFIRM = "confirm"
BACK    = "back"
RESTART = "restart"

DIRECTIONS = {
    UP:    Direction.UP,
    DOWN:  Direction.DOWN,
    LEFT:  Direction.LEFT,
    RIGHT: Direction.RIGHT,
}

KEYPAD = {
    "2": UP,
    "4": LEFT,
    "6": RIGHT,
    "8": DOWN,
    "*": PAUSE,
}


def dispatch(session: Session, intent: str) -> None:
    """Apply one keyboard intent."""
    if intent == PAUSE:
        session.toggle_pause()
        return

    if session.screen == SCREEN_MENU:
        _menu_intent(session, intent)
        return

    if session.screen == SCREEN_INSTRUCTIONS and intent in (CONFIRM, BACK):
        session.dismiss_instructions()
        return

    if session.state == STATE_PLAYING and intent in DIRECTIONS:
        d = DIRECTIONS[intent]
        if not session.model.set_direction(d.x, d.y):
            log.debug("Reverse turn %s ignored", intent)

    if intent == RESTART:
        session.start_new_game()


def _menu_intent(session: Session, intent: str) -> None:
    if intent == UP:
        session.menu_up()
    elif intent == DOWN:
        session.menu_down()
    elif intent == CONFIRM:
        session.select_menu_item(session.menu_index)
    elif intent == BACK:
        session.resume_game()


def press_key(session: Session, label: str) -> None:
    """A tap on a keypad button ("2", "4", "6", "8" or "*")."""
    intent = KEYPAD.get(label)
    if intent == PAUSE:
        session.toggle_pause()
    elif intent is not None and session.state == STATE_PLAYING:
        d = DIRECTIONS[intent]
        session.model.set_direction(d.x, d.y)


def pointer_down(session: Session, layout: Layout, pos: tuple[int, int]) -> None:
    """Mouse / touch press at a window position."""
    if layout is None:
        return
    if session.restart_visible and layout.restart.collidepoint(pos):
        session.start_new_game()
        return

    label = key_at(layout, pos)
    if label is not None:
        press_key(session, label)
        return

    if session.screen == SCREEN_MENU:
        row = menu_row_at(layout, pos)
        if row is not None:
            session.menu_index = row
            session.select_menu_item(row)
