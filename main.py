"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame

Environment:
    PHONESNAKE_PHONE_IMAGE  path to a 1600x1600 phone picture (optional)
    PHONESNAKE_STATS_PATH   where best score / attempts are kept
    PHONESNAKE_LOG_LEVEL    DEBUG, INFO, WARNING ...
"""

import logging

from phonesnake.config import LOG_LEVEL, LOG_FORMAT
from phonesnake.controller import GameController


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL.upper(), format=LOG_FORMAT)
    GameController().run()


if __name__ == "__main__":
    main()
