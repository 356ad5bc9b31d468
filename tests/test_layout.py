import pytest

from phonesnake.config import GRID_COLS, GRID_ROWS
from phonesnake.layout import (
    compute_layout, fit_board, fit_phone, font_scale, key_at,
    menu_metrics, menu_row_at, px, round_half_up,
)


def test_round_half_up():
    assert round_half_up(512.5) == 513
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_design_size_layout(layout):
    assert layout.scale == 1.0
    assert tuple(layout.screen) == (580, 308, 450, 390)
    assert tuple(layout.keys["2"]) == (725, 1060, 150, 150)
    assert tuple(layout.keys["4"]) == (513, 1150, 195, 150)
    assert tuple(layout.keys["*"]) == (513, 1390, 195, 150)
    assert layout.key_radius("2") == 33


def test_board_fit_at_design_size(layout):
    board = layout.board
    assert board.cell == 20
    assert (board.off_x, board.off_y) == (25, 35)
    assert (board.w, board.h) == (20 * GRID_COLS, 20 * GRID_ROWS)


def test_half_scale_layout():
    layout = compute_layout(800, origin=(10, 60))
    assert layout.scale == 0.5
    assert tuple(layout.screen) == (300, 214, 225, 195)
    assert tuple(layout.phone) == (10, 60, 800, 800)


@pytest.mark.parametrize("width", [200, 400, 613, 800, 1111, 1600, 2400])
def test_board_stays_inside_screen(width):
    layout = compute_layout(width)
    board = layout.board
    assert board.cell >= 8
    if board.cell > 8:
        pad = board.cell * 0.35
        assert board.off_x - pad >= 0
        assert board.off_y - pad >= 0
        assert board.off_x + board.w + pad <= layout.screen.width
        assert board.off_y + board.h + pad <= layout.screen.height


def test_tiny_screen_keeps_minimum_cell():
    assert fit_board(30, 30).cell == 8


def test_board_is_centred():
    board = fit_board(450, 390)
    left = board.off_x
    right = 450 - (board.off_x + board.w)
    assert abs(left - right) <= 1


def test_cell_rect_scales():
    board = fit_board(450, 390)
    x, y, w, h = board.cell_rect(0, 0, 0.7)
    assert (w, h) == (14, 14)
    assert (x, y) == (board.off_x + 3, board.off_y + 3)
    assert board.cell_rect(1, 0, 0.95)[2] == 20
    assert board.cell_rect(1, 0, 0.85)[2] == 18


def test_fit_phone():
    assert fit_phone(760, 820, 56) == (760, (0, 58))
    assert fit_phone(1200, 656, 56) == (600, (300, 56))


def test_key_hit_testing(layout):
    assert key_at(layout, (800, 1135)) == "2"
    assert key_at(layout, (520, 1160)) == "4"
    assert key_at(layout, (990, 1225)) == "6"
    assert key_at(layout, (800, 1350)) == "8"
    assert key_at(layout, (610, 1465)) == "*"
    assert key_at(layout, (5, 5)) is None


def test_font_scale_clamps():
    assert font_scale(compute_layout(1600)) == pytest.approx(0.88)
    assert font_scale(compute_layout(400)) == 0.62
    assert font_scale(compute_layout(4000)) == 0.9


def test_px_minimum():
    assert px(10, 0.62) == 9
    assert px(22, 0.88) == 19


def test_menu_metrics():
    assert menu_metrics(0.88) == (9, 35, 26)
    assert menu_metrics(0.62)[2] == 22


def test_menu_row_hit_testing(layout):
    top = layout.screen.top
    assert menu_row_at(layout, (600, top + 36)) == 0
    assert menu_row_at(layout, (600, top + 35 + 26 + 1)) == 1
    assert menu_row_at(layout, (600, top + 35 + 52 + 5)) == 2
    assert menu_row_at(layout, (600, top + 10)) is None
    assert menu_row_at(layout, (600, top + 35 + 78 + 1)) is None
    assert menu_row_at(layout, (570, top + 40)) is None
