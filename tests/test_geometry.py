import math

import pytest

from toyrobot.table.geometry import BOARD_SIZE, is_on_board


def test_board_is_five_by_five():
    assert BOARD_SIZE == 5


@pytest.mark.parametrize("x", range(5))
@pytest.mark.parametrize("y", range(5))
def test_every_cell_is_on_board(x, y):
    assert is_on_board(x, y) is True


@pytest.mark.parametrize(
    "x, y",
    [(-1, 0), (0, -1), (5, 0), (0, 5), (5, 5), (-1, -1), (100, 2)],
)
def test_outside_cells_are_off_board(x, y):
    assert is_on_board(x, y) is False


def test_whole_floats_count_as_cells():
    assert is_on_board(2.0, 4.0) is True


@pytest.mark.parametrize("value", [1.5, -0.5, 4.999, math.nan, math.inf, -math.inf])
def test_fractional_and_non_finite_values_are_off_board(value):
    assert is_on_board(value, 0) is False
    assert is_on_board(0, value) is False
