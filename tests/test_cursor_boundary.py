"""Tests for cursor clipping and row/column arithmetic."""

import pytest
from pagepad.cursor import Cursor


@pytest.mark.parametrize("start", [0, 1, 9, 10, 25, 48, 49])
@pytest.mark.parametrize("delta", [-1000, -50, -11, -10, -1, 0, 1, 10, 11, 50, 1000])
def test_move_always_stays_on_page(start, delta):
    cursor = Cursor(10, 5, point=start)
    cursor.move(delta)
    assert 0 <= cursor.point <= 49


def test_move_saturates_at_both_ends():
    cursor = Cursor(10, 5, point=3)
    cursor.move(-10)
    assert cursor.point == 0
    cursor.move(500)
    assert cursor.point == 49


def test_coords():
    cursor = Cursor(10, 5, point=23)
    assert cursor.coords() == (2, 3)
    assert cursor.row == 2
    assert cursor.column == 3


def test_margins():
    cursor = Cursor(10, 5, point=23)
    assert cursor.right_margin == 7
    assert cursor.rows_below == 3
    assert cursor.row_start == 20


def test_margins_at_last_cell():
    cursor = Cursor(10, 5, point=49)
    assert cursor.right_margin == 1
    assert cursor.rows_below == 1


def test_offset_does_not_move():
    cursor = Cursor(10, 5, point=0)
    assert cursor.offset(-1) == 0
    assert cursor.offset(3) == 3
    assert cursor.point == 0


def test_set_point_clips():
    cursor = Cursor(10, 5)
    cursor.set_point(50)
    assert cursor.point == 49
    cursor.set_point(-2)
    assert cursor.point == 0


def test_reset():
    cursor = Cursor(10, 5, page=3, point=17)
    cursor.reset()
    assert (cursor.page, cursor.point) == (0, 0)
