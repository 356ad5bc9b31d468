import logging
import random

import pytest

from phonesnake.config import GRID_COLS, GRID_ROWS, FOOD_FALLBACK
from phonesnake.model import (
    ALL_DIRS, Direction, GameModel,
    TICK_ATE, TICK_DIED, TICK_MOVED,
    speed_level, tick_interval_ms,
)


def test_reset_places_centered_snake(model):
    assert model.snake == [(9, 8), (8, 8), (7, 8)]
    assert model.dir == Direction.RIGHT
    assert model.next_dir == Direction.RIGHT
    assert model.score == 0
    assert not model.game_over
    assert model.food not in model.snake


def test_reset_clears_previous_game(model):
    model.score = 7
    model.game_over = True
    model.snake = [(1, 1)]
    model.reset()
    assert model.score == 0
    assert not model.game_over
    assert len(model.snake) == 3


@pytest.mark.parametrize("current", ALL_DIRS)
def test_reverse_direction_is_ignored(model, current):
    model.dir = current
    model.set_direction(current.x, current.y)
    before = model.next_dir
    assert model.set_direction(-current.x, -current.y) is False
    assert model.next_dir == before


def test_reverse_check_uses_current_not_pending(model):
    assert model.set_direction(0, -1)
    # LEFT reverses the current RIGHT even though UP is pending
    assert not model.set_direction(-1, 0)
    assert model.next_dir == Direction.UP


def test_eating_grows_snake_and_scores(model):
    model.snake = [(5, 5), (4, 5), (3, 5)]
    model.food = (6, 5)
    assert model.tick() == TICK_ATE
    assert model.snake == [(6, 5), (5, 5), (4, 5), (3, 5)]
    assert model.score == 1
    assert model.food not in model.snake


def test_plain_move_keeps_length(model):
    model.snake = [(5, 5), (4, 5), (3, 5)]
    model.food = (0, 0)
    assert model.tick() == TICK_MOVED
    assert model.snake == [(6, 5), (5, 5), (4, 5)]
    assert model.score == 0


def test_pending_direction_applied_on_tick(model):
    model.snake = [(5, 5), (4, 5), (3, 5)]
    model.food = (0, 0)
    model.set_direction(0, 1)
    model.tick()
    assert model.dir == Direction.DOWN
    assert model.head == (5, 6)


def test_wraps_right_edge(model):
    model.snake = [(19, 5), (18, 5), (17, 5)]
    model.food = (0, 0)
    model.tick()
    assert model.head == (0, 5)


@pytest.mark.parametrize("snake, turn, expected", [
    ([(0, 5), (1, 5), (2, 5)], (-1, 0), (GRID_COLS - 1, 5)),
    ([(5, 0), (5, 1), (5, 2)], (0, -1), (5, GRID_ROWS - 1)),
    ([(5, GRID_ROWS - 1), (5, GRID_ROWS - 2), (5, GRID_ROWS - 3)], (0, 1), (5, 0)),
])
def test_wraps_other_edges(model, snake, turn, expected):
    model.snake = snake
    model.dir = Direction(*turn)
    model.set_direction(*turn)
    model.food = (10, 10)
    model.tick()
    assert model.head == expected


def test_self_collision_ends_game(model):
    model.snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6), (4, 7)]
    model.dir = Direction.LEFT
    model.set_direction(0, 1)
    model.food = (0, 0)
    assert model.tick() == TICK_DIED
    assert model.game_over
    frozen = list(model.snake)
    assert model.tick() is None
    assert model.snake == frozen
    assert model.score == 0


def test_following_the_tail_is_safe(model):
    model.snake = [(5, 5), (6, 5), (6, 6), (5, 6)]
    model.dir = Direction.LEFT
    model.set_direction(0, 1)
    model.food = (0, 0)
    assert model.tick() == TICK_MOVED
    assert model.head == (5, 6)


def test_food_spawns_on_the_only_free_cell():
    m = GameModel(cols=4, rows=4, rng=random.Random(7))
    m.snake = [(x, y) for y in range(4) for x in range(4) if (x, y) != (2, 3)]
    assert m.spawn_food() == (2, 3)


def test_food_falls_back_when_board_is_full(caplog):
    m = GameModel(cols=4, rows=4, rng=random.Random(7))
    m.snake = [(x, y) for y in range(4) for x in range(4)]
    with caplog.at_level(logging.WARNING):
        assert m.spawn_food() == FOOD_FALLBACK
    assert "No free cell" in caplog.text


def test_random_play_keeps_invariants():
    rng = random.Random(99)
    m = GameModel(rng=random.Random(5))
    for _ in range(2000):
        d = rng.choice(ALL_DIRS)
        m.set_direction(d.x, d.y)
        before = len(m.snake)
        result = m.tick()
        if result == TICK_DIED:
            break
        hx, hy = m.head
        assert 0 <= hx < GRID_COLS and 0 <= hy < GRID_ROWS
        assert len(m.snake) == before + (1 if result == TICK_ATE else 0)
        assert len(set(m.snake)) == len(m.snake)
        assert m.food not in m.snake


def test_speed_levels():
    assert speed_level(0) == 1
    assert speed_level(4) == 1
    assert speed_level(5) == 2
    assert speed_level(44) == 9
    assert speed_level(45) == 10
    assert speed_level(500) == 10


def test_tick_intervals():
    assert tick_interval_ms(0) == 220
    assert tick_interval_ms(5) == 205
    assert tick_interval_ms(45) == 85
    assert tick_interval_ms(10_000) >= 80


def test_speed_model_is_monotonic():
    levels = [speed_level(s) for s in range(200)]
    intervals = [tick_interval_ms(s) for s in range(200)]
    assert levels == sorted(levels)
    assert intervals == sorted(intervals, reverse=True)
    assert max(levels) == 10
    assert min(intervals) >= 80


def test_direction_value_semantics():
    assert Direction(1, 0) == Direction.RIGHT
    assert hash(Direction(0, 1)) == hash(Direction.DOWN)
    assert Direction.UP.is_opposite(Direction.DOWN)
    assert not Direction.UP.is_opposite(Direction.LEFT)
