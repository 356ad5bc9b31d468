import datetime
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from phonesnake.layout import compute_layout
from phonesnake.model import GameModel
from phonesnake.session import Session
from phonesnake.stats import MemoryBackend, StatsStore

DAY = datetime.date(2026, 10, 18)


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return StatsStore(backend, today=lambda: DAY)


@pytest.fixture
def model():
    return GameModel(rng=random.Random(1234))


@pytest.fixture
def session(store, model):
    return Session(stats=store, model=model)


@pytest.fixture
def layout():
    # Phone drawn at design size: scale 1.0
    return compute_layout(1600)
